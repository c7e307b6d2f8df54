"""Unit tests for CLI commands.

Tests CLI behavior using Click's CliRunner, with NpmApiClient wired to
FakeNpm instead of the network.
Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

from __future__ import annotations

import functools
import json

import httpx
import pytest
from click.testing import CliRunner

from npm_mcp import __version__
from npm_mcp.api.client import NpmApiClient
from npm_mcp.cli import cli

CLI_ENV = {
    "NPM_URL": "http://npm.test",
    "NPM_EMAIL": "admin@example.com",
    "NPM_PASSWORD": "changeme",
    "NPM_READONLY": None,
    "NPM_TIMEOUT": None,
    "NPM_LOG_LEVEL": None,
    "NPM_LOG_FILE": None,
}


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def fake_client(monkeypatch: pytest.MonkeyPatch, http_client: httpx.AsyncClient) -> None:
    """Route every client the CLI builds through FakeNpm."""
    monkeypatch.setattr("npm_mcp.cli.helpers.NpmApiClient", functools.partial(NpmApiClient, http_client=http_client))


class TestUsage:
    """Tests for version, help and unknown commands."""

    def test_version_flag_shows_version(self, runner: CliRunner) -> None:
        """Given --version flag, returns version string."""
        # Act
        result = runner.invoke(cli, ["--version"])

        # Assert
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_prints_usage(self, runner: CliRunner) -> None:
        # Act
        result = runner.invoke(cli, [], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert "proxy-hosts" in result.output
        assert "NPM_EMAIL" in result.output

    def test_unknown_command_prints_usage_and_succeeds(self, runner: CliRunner, fake_npm) -> None:
        """An unknown top-level command prints the full usage with exit 0."""
        # Act
        result = runner.invoke(cli, ["frobnicate"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "dead-hosts" in result.output
        assert fake_npm.requests == []

    def test_unknown_subcommand_exits_one(self, runner: CliRunner, fake_npm) -> None:
        # Act
        result = runner.invoke(cli, ["proxy-hosts", "frobnicate"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert fake_npm.requests == []

    def test_bad_option_value_exits_one(self, runner: CliRunner, fake_npm) -> None:
        # Act
        result = runner.invoke(cli, ["streams", "create", "--incoming-port", "many"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert fake_npm.requests == []


class TestReadCommands:
    """Tests for commands printing JSON."""

    def test_list_proxy_hosts(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/nginx/proxy-hosts", json_body=[{"id": 1}, {"id": 2}])

        # Act
        result = runner.invoke(cli, ["proxy-hosts", "list"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"id": 1}, {"id": 2}]

    def test_get_user(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/users/1", json_body={"id": 1, "email": "admin@example.com"})

        # Act
        result = runner.invoke(cli, ["users", "get", "1"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.output)["email"] == "admin@example.com"

    def test_status(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("GET", "/api/", json_body={"status": "OK", "version": {"major": 2}})

        # Act
        result = runner.invoke(cli, ["status"], env={**CLI_ENV, "NPM_READONLY": "true"})

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.output)["mcp_server"] == {"readonly": True, "mode": "readonly"}

    def test_renew_certificate_prints_json(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("POST", "/api/nginx/certificates/3/renew", json_body={"id": 3, "nice_name": "example"})

        # Act
        result = runner.invoke(cli, ["certificates", "renew", "3"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.output)["nice_name"] == "example"


class TestCreateCommands:
    """Tests for create subcommands building request bodies from options."""

    def test_create_proxy_host(self, runner: CliRunner, fake_npm) -> None:
        """Options become the request body; the created host is printed."""
        # Arrange
        fake_npm.route("POST", "/api/nginx/proxy-hosts", json_body={"id": 21, "domain_names": ["a.com", "b.com"]})

        # Act
        result = runner.invoke(
            cli,
            ["proxy-hosts", "create", "--domains", "a.com,b.com", "--forward-host", "10.0.0.5", "--ssl-forced"],
            env=CLI_ENV,
        )

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.output)["id"] == 21
        body = fake_npm.last_body()
        assert body["domain_names"] == ["a.com", "b.com"]
        assert body["forward_host"] == "10.0.0.5"
        assert body["forward_port"] == 80
        assert body["forward_scheme"] == "http"
        assert body["ssl_forced"] is True
        assert body["caching_enabled"] is False

    def test_create_proxy_host_missing_host_is_invalid_input(self, runner: CliRunner, fake_npm) -> None:
        """Validation fails before any request is sent."""
        # Act
        result = runner.invoke(cli, ["proxy-hosts", "create", "--domains", "a.com"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert "Invalid input" in result.output
        assert fake_npm.requests == []

    def test_create_stream_no_tcp(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("POST", "/api/nginx/streams", json_body={"id": 2})

        # Act
        result = runner.invoke(
            cli,
            [
                "streams",
                "create",
                "--incoming-port",
                "5353",
                "--forward-host",
                "10.0.0.53",
                "--forward-port",
                "53",
                "--no-tcp",
                "--udp",
            ],
            env=CLI_ENV,
        )

        # Assert
        assert result.exit_code == 0
        body = fake_npm.last_body()
        assert body["tcp_forwarding"] is False
        assert body["udp_forwarding"] is True

    def test_create_redirection_defaults(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("POST", "/api/nginx/redirection-hosts", json_body={"id": 8})

        # Act
        result = runner.invoke(
            cli,
            ["redirections", "create", "--domains", "old.com", "--forward-domain", "new.com"],
            env=CLI_ENV,
        )

        # Assert
        assert result.exit_code == 0
        body = fake_npm.last_body()
        assert body["forward_scheme"] == "$scheme"
        assert body["forward_http_code"] == 301
        assert body["preserve_path"] is True

    def test_create_access_list_default_name(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("POST", "/api/nginx/access-lists", json_body={"id": 4})

        # Act
        result = runner.invoke(cli, ["access-lists", "create"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert fake_npm.last_body()["name"] == "New Access List"

    def test_update_proxy_host_sends_only_given_options(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.route("PUT", "/api/nginx/proxy-hosts/6", json_body={"id": 6})

        # Act
        result = runner.invoke(cli, ["proxy-hosts", "update", "6", "--forward-port", "9000", "--no-caching"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert fake_npm.last_body() == {"forward_port": 9000, "caching_enabled": False}


class TestActionCommands:
    """Tests for delete/enable/disable success lines."""

    @pytest.mark.parametrize(
        ("args", "method", "path", "line"),
        [
            (["proxy-hosts", "delete", "5"], "DELETE", "/api/nginx/proxy-hosts/5", "Proxy host 5 deleted"),
            (["proxy-hosts", "enable", "5"], "POST", "/api/nginx/proxy-hosts/5/enable", "Proxy host 5 enabled"),
            (["streams", "disable", "5"], "POST", "/api/nginx/streams/5/disable", "Stream 5 disabled"),
            (["certificates", "delete", "5"], "DELETE", "/api/nginx/certificates/5", "Certificate 5 deleted"),
            (["redirections", "delete", "5"], "DELETE", "/api/nginx/redirection-hosts/5", "Redirection host 5 deleted"),
            (["dead-hosts", "enable", "5"], "POST", "/api/nginx/dead-hosts/5/enable", "Dead host 5 enabled"),
        ],
    )
    def test_success_line(
        self, runner: CliRunner, fake_npm, args: list[str], method: str, path: str, line: str
    ) -> None:
        # Arrange
        fake_npm.route(method, path, json_body=True)

        # Act
        result = runner.invoke(cli, args, env=CLI_ENV)

        # Assert
        assert result.exit_code == 0
        assert result.output.strip() == line


class TestErrors:
    """Tests for failures exiting 1 with 'Error: ...'."""

    def test_non_numeric_id(self, runner: CliRunner, fake_npm) -> None:
        """A non-numeric id fails before any request."""
        # Act
        result = runner.invoke(cli, ["proxy-hosts", "get", "abc"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert "Error: Invalid ID" in result.output
        assert fake_npm.requests == []

    def test_remote_not_found(self, runner: CliRunner, fake_npm) -> None:
        # Act
        result = runner.invoke(cli, ["streams", "get", "42"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert "Error: API request failed: 404" in result.output

    def test_readonly_blocks_write(self, runner: CliRunner, fake_npm) -> None:
        """Readonly mode fails the command without contacting NPM."""
        # Act
        result = runner.invoke(cli, ["proxy-hosts", "delete", "5"], env={**CLI_ENV, "NPM_READONLY": "true"})

        # Assert
        assert result.exit_code == 1
        assert 'Operation "deleteProxyHost" is not allowed in readonly mode' in result.output
        assert "deleted" not in result.output
        assert fake_npm.requests == []

    def test_missing_credentials(self, runner: CliRunner, fake_npm) -> None:
        # Act
        result = runner.invoke(cli, ["users", "list"], env={**CLI_ENV, "NPM_EMAIL": None})

        # Assert
        assert result.exit_code == 1
        assert "NPM_EMAIL and NPM_PASSWORD" in result.output
        assert fake_npm.requests == []

    def test_authentication_failure(self, runner: CliRunner, fake_npm) -> None:
        # Arrange
        fake_npm.token_status = 403

        # Act
        result = runner.invoke(cli, ["users", "list"], env=CLI_ENV)

        # Assert
        assert result.exit_code == 1
        assert "Error: Authentication failed (403)" in result.output

    def test_unusable_log_file(self, runner: CliRunner, fake_npm, tmp_path) -> None:
        """A log file that cannot be opened is reported like any configuration error."""
        # Arrange
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        # Act
        result = runner.invoke(
            cli, ["users", "list"], env={**CLI_ENV, "NPM_LOG_FILE": str(blocker / "sub" / "log.jsonl")}
        )

        # Assert
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error: Cannot open log file" in result.output
        assert fake_npm.requests == []
