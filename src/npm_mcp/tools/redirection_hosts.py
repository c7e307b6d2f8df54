"""Redirection host tools."""

from __future__ import annotations

__all__ = ["register_redirection_host_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.models import RedirectionHostCreate, RedirectionHostUpdate, RedirectScheme
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, given, tool_errors
from npm_mcp.utils.output import render_json

RedirectCode = Annotated[int, Field(ge=300, le=308)]


def register_redirection_host_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/create/update/delete/enable/disable tools for redirection hosts."""

    @mcp.tool(name="list_redirection_hosts", description="List all redirection hosts", annotations=READ_ONLY)
    async def list_redirection_hosts() -> str:
        with tool_errors():
            return render_json(await client.list_redirection_hosts())

    @mcp.tool(
        name="get_redirection_host",
        description="Get details of a specific redirection host by ID",
        annotations=READ_ONLY,
    )
    async def get_redirection_host(
        id: Annotated[int, Field(description="The redirection host ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_redirection_host(id))

    @mcp.tool(
        name="create_redirection_host",
        description="Create a new redirection host to redirect traffic from domain(s) to another URL",
        annotations=WRITE,
    )
    async def create_redirection_host(
        domain_names: Annotated[list[str], Field(description="List of domain names")],
        forward_domain_name: Annotated[str, Field(description="Target domain to redirect to")],
        forward_scheme: Annotated[RedirectScheme, Field(description="Redirect scheme")] = "$scheme",
        forward_http_code: Annotated[RedirectCode, Field(description="HTTP redirect code (301, 302, etc.)")] = 301,
        preserve_path: Annotated[bool, Field(description="Preserve the path in redirect")] = True,
        ssl_forced: Annotated[bool, Field(description="Force SSL")] = False,
        block_exploits: Annotated[bool, Field(description="Block exploits")] = False,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID")] = None,
    ) -> str:
        with tool_errors():
            host = await client.create_redirection_host(
                RedirectionHostCreate(
                    domain_names=domain_names,
                    forward_scheme=forward_scheme,
                    forward_domain_name=forward_domain_name,
                    forward_http_code=forward_http_code,
                    preserve_path=preserve_path,
                    ssl_forced=ssl_forced,
                    block_exploits=block_exploits,
                    certificate_id=certificate_id,
                )
            )
            return f"Redirection host created successfully:\n{render_json(host)}"

    @mcp.tool(
        name="update_redirection_host",
        description="Update an existing redirection host. Only the fields given are changed.",
        annotations=WRITE,
    )
    async def update_redirection_host(
        id: Annotated[int, Field(description="The redirection host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="List of domain names")] = None,
        forward_domain_name: Annotated[str | None, Field(description="Target domain")] = None,
        forward_scheme: Annotated[RedirectScheme | None, Field(description="Redirect scheme")] = None,
        forward_http_code: Annotated[RedirectCode | None, Field(description="HTTP redirect code")] = None,
        preserve_path: Annotated[bool | None, Field(description="Preserve the path in redirect")] = None,
        ssl_forced: Annotated[bool | None, Field(description="Force SSL")] = None,
        block_exploits: Annotated[bool | None, Field(description="Block exploits")] = None,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID")] = None,
    ) -> str:
        with tool_errors():
            patch = RedirectionHostUpdate(
                **given(
                    domain_names=domain_names,
                    forward_domain_name=forward_domain_name,
                    forward_scheme=forward_scheme,
                    forward_http_code=forward_http_code,
                    preserve_path=preserve_path,
                    ssl_forced=ssl_forced,
                    block_exploits=block_exploits,
                    certificate_id=certificate_id,
                )
            )
            host = await client.update_redirection_host(id, patch)
            return f"Redirection host updated successfully:\n{render_json(host)}"

    @mcp.tool(name="delete_redirection_host", description="Delete a redirection host", annotations=DESTRUCTIVE)
    async def delete_redirection_host(
        id: Annotated[int, Field(description="The redirection host ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_redirection_host(id)
            return f"Redirection host {id} deleted successfully"

    @mcp.tool(name="enable_redirection_host", description="Enable a redirection host", annotations=WRITE)
    async def enable_redirection_host(
        id: Annotated[int, Field(description="The redirection host ID to enable")],
    ) -> str:
        with tool_errors():
            await client.enable_redirection_host(id)
            return f"Redirection host {id} enabled successfully"

    @mcp.tool(name="disable_redirection_host", description="Disable a redirection host", annotations=WRITE)
    async def disable_redirection_host(
        id: Annotated[int, Field(description="The redirection host ID to disable")],
    ) -> str:
        with tool_errors():
            await client.disable_redirection_host(id)
            return f"Redirection host {id} disabled successfully"
