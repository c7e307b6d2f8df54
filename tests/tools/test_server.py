"""End-to-end tests for the MCP tools.

Calls go through an in-memory FastMCP Client into create_server(), whose
NpmApiClient talks to FakeNpm.
Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
from fastmcp import Client

from npm_mcp.api.client import NpmApiClient
from npm_mcp.server import create_server, main
from npm_mcp.utils.logging import get_logger

ALL_TOOLS = {
    "list_proxy_hosts",
    "get_proxy_host",
    "create_proxy_host",
    "update_proxy_host",
    "delete_proxy_host",
    "enable_proxy_host",
    "disable_proxy_host",
    "list_certificates",
    "get_certificate",
    "renew_certificate",
    "delete_certificate",
    "list_streams",
    "get_stream",
    "create_stream",
    "update_stream",
    "delete_stream",
    "enable_stream",
    "disable_stream",
    "list_redirection_hosts",
    "get_redirection_host",
    "create_redirection_host",
    "update_redirection_host",
    "delete_redirection_host",
    "enable_redirection_host",
    "disable_redirection_host",
    "list_dead_hosts",
    "get_dead_host",
    "create_dead_host",
    "update_dead_host",
    "delete_dead_host",
    "enable_dead_host",
    "disable_dead_host",
    "list_access_lists",
    "get_access_list",
    "create_access_list",
    "update_access_list",
    "delete_access_list",
    "list_users",
    "get_user",
    "get_status",
}


def _text(result) -> str:
    return result.content[0].text


class TestToolCatalogue:
    """Tests for the registered tool set and schemas."""

    @pytest.mark.asyncio
    async def test_all_tools_registered(self, npm_client: NpmApiClient) -> None:
        """One tool per client operation, nothing else."""
        # Act
        async with Client(create_server(npm_client)) as mcp:
            tools = await mcp.list_tools()

        # Assert
        assert {tool.name for tool in tools} == ALL_TOOLS

    @pytest.mark.asyncio
    async def test_create_proxy_host_schema(self, npm_client: NpmApiClient) -> None:
        """Required fields, enum values and defaults are advertised."""
        # Act
        async with Client(create_server(npm_client)) as mcp:
            tools = {tool.name: tool for tool in await mcp.list_tools()}

        # Assert
        schema = tools["create_proxy_host"].inputSchema
        assert set(schema["required"]) == {"domain_names", "forward_host", "forward_port"}
        assert schema["properties"]["forward_scheme"]["enum"] == ["http", "https"]
        assert schema["properties"]["forward_scheme"]["default"] == "http"
        assert schema["properties"]["ssl_forced"]["default"] is False

    @pytest.mark.asyncio
    async def test_annotations(self, npm_client: NpmApiClient) -> None:
        """Reads are marked read-only and deletes destructive."""
        # Act
        async with Client(create_server(npm_client)) as mcp:
            tools = {tool.name: tool for tool in await mcp.list_tools()}

        # Assert
        assert tools["list_streams"].annotations.readOnlyHint is True
        assert tools["delete_stream"].annotations.destructiveHint is True
        assert tools["enable_stream"].annotations.readOnlyHint is False


class TestToolCalls:
    """Tests for tool results."""

    @pytest.mark.asyncio
    async def test_list_returns_json(self, npm_client: NpmApiClient, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/nginx/proxy-hosts", json_body=[{"id": 1, "domain_names": ["a.example.com"]}])

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool("list_proxy_hosts", {})

        # Assert
        assert json.loads(_text(result)) == [{"id": 1, "domain_names": ["a.example.com"]}]

    @pytest.mark.asyncio
    async def test_create_proxy_host(self, npm_client: NpmApiClient, fake_npm) -> None:
        """Create sends the defaults and prefixes the result."""
        # Arrange
        fake_npm.route("POST", "/api/nginx/proxy-hosts", json_body={"id": 12, "domain_names": ["a.example.com"]})

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool(
                "create_proxy_host",
                {"domain_names": ["a.example.com"], "forward_host": "10.0.0.5", "forward_port": 8080},
            )

        # Assert
        text = _text(result)
        assert text.startswith("Proxy host created successfully:\n")
        assert json.loads(text.split("\n", 1)[1])["id"] == 12
        body = fake_npm.last_body()
        assert body["forward_scheme"] == "http"
        assert body["ssl_forced"] is False
        assert body["allow_websocket_upgrade"] is False
        assert "certificate_id" not in body

    @pytest.mark.asyncio
    async def test_create_stream_defaults(self, npm_client: NpmApiClient, fake_npm) -> None:
        # Arrange
        fake_npm.route("POST", "/api/nginx/streams", json_body={"id": 3})

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool(
                "create_stream", {"incoming_port": 2222, "forwarding_host": "10.0.0.9", "forwarding_port": 22}
            )

        # Assert
        assert _text(result).startswith("Stream created successfully:")
        assert fake_npm.last_body()["tcp_forwarding"] is True
        assert fake_npm.last_body()["udp_forwarding"] is False

    @pytest.mark.asyncio
    async def test_update_sends_only_given_fields(self, npm_client: NpmApiClient, fake_npm) -> None:
        # Arrange
        fake_npm.route("PUT", "/api/nginx/redirection-hosts/4", json_body={"id": 4, "forward_http_code": 302})

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool("update_redirection_host", {"id": 4, "forward_http_code": 302})

        # Assert
        assert _text(result).startswith("Redirection host updated successfully:")
        assert fake_npm.last_body() == {"forward_http_code": 302}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("tool", "method", "path", "message"),
        [
            ("delete_proxy_host", "DELETE", "/api/nginx/proxy-hosts/5", "Proxy host 5 deleted successfully"),
            ("enable_stream", "POST", "/api/nginx/streams/5/enable", "Stream 5 enabled successfully"),
            ("disable_dead_host", "POST", "/api/nginx/dead-hosts/5/disable", "Dead host 5 disabled successfully"),
            ("delete_certificate", "DELETE", "/api/nginx/certificates/5", "Certificate 5 deleted successfully"),
            ("delete_access_list", "DELETE", "/api/nginx/access-lists/5", "Access list 5 deleted successfully"),
        ],
    )
    async def test_action_messages(
        self, npm_client: NpmApiClient, fake_npm, tool: str, method: str, path: str, message: str
    ) -> None:
        # Arrange
        fake_npm.route(method, path, json_body=True)

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool(tool, {"id": 5})

        # Assert
        assert _text(result) == message

    @pytest.mark.asyncio
    async def test_get_status(self, npm_client: NpmApiClient, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/", json_body={"status": "OK", "version": {"major": 2}})

        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool("get_status", {})

        # Assert
        assert json.loads(_text(result)) == {
            "status": "OK",
            "version": {"major": 2},
            "mcp_server": {"readonly": False, "mode": "read-write"},
        }


class TestToolErrors:
    """Errors come back as error results with an 'Error: ' prefix."""

    @pytest.mark.asyncio
    async def test_remote_error(self, npm_client: NpmApiClient, fake_npm) -> None:
        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool_mcp("get_proxy_host", {"id": 999})

        # Assert
        assert result.isError is True
        assert result.content[0].text.startswith("Error: API request failed: 404 - ")

    @pytest.mark.asyncio
    async def test_readonly_error(self, readonly_client: NpmApiClient, fake_npm) -> None:
        """Readonly blocks the write and nothing reaches NPM."""
        # Act
        async with Client(create_server(readonly_client)) as mcp:
            result = await mcp.call_tool_mcp("delete_stream", {"id": 3})

        # Assert
        assert result.isError is True
        assert result.content[0].text == 'Error: Operation "deleteStream" is not allowed in readonly mode'
        assert fake_npm.requests == []

    @pytest.mark.asyncio
    async def test_readonly_status(self, readonly_client: NpmApiClient, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/", json_body={"status": "OK"})

        # Act
        async with Client(create_server(readonly_client)) as mcp:
            result = await mcp.call_tool("get_status", {})

        # Assert
        assert json.loads(_text(result))["mcp_server"] == {"readonly": True, "mode": "readonly"}

    @pytest.mark.asyncio
    async def test_invalid_port_rejected(self, npm_client: NpmApiClient, fake_npm) -> None:
        """Arguments outside the schema never reach NPM."""
        # Act
        async with Client(create_server(npm_client)) as mcp:
            result = await mcp.call_tool_mcp(
                "create_stream", {"incoming_port": 70000, "forwarding_host": "h", "forwarding_port": 22}
            )

        # Assert
        assert result.isError is True
        assert fake_npm.requests == []


class TestMain:
    """Tests for the npm-mcp entry point failing before the server starts."""

    @pytest.fixture(autouse=True)
    def server_env(self, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
        monkeypatch.setenv("NPM_URL", "http://npm.test")
        monkeypatch.setenv("NPM_EMAIL", "admin@example.com")
        monkeypatch.setenv("NPM_PASSWORD", "changeme")
        for name in ("NPM_READONLY", "NPM_TIMEOUT", "NPM_LOG_LEVEL", "NPM_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        yield
        logger = get_logger()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_missing_credentials_exit_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        # Arrange
        monkeypatch.delenv("NPM_PASSWORD")

        # Act
        with pytest.raises(SystemExit) as exc_info:
            main()

        # Assert
        assert exc_info.value.code == 1
        assert "NPM_EMAIL and NPM_PASSWORD" in capsys.readouterr().err

    def test_unusable_log_file_exit_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, tmp_path
    ) -> None:
        """An unopenable log file stops startup with 'Error: ...' instead of a traceback."""
        # Arrange
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.setenv("NPM_LOG_FILE", str(blocker / "sub" / "log.jsonl"))

        # Act
        with pytest.raises(SystemExit) as exc_info:
            main()

        # Assert
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Cannot open log file")
