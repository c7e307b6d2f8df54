"""Dead host (404 host) tools."""

from __future__ import annotations

__all__ = ["register_dead_host_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.models import DeadHostCreate, DeadHostUpdate
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, given, tool_errors
from npm_mcp.utils.output import render_json


def register_dead_host_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/create/update/delete/enable/disable tools for 404 hosts."""

    @mcp.tool(
        name="list_dead_hosts",
        description="List all 404 hosts (domains that show a 404 page)",
        annotations=READ_ONLY,
    )
    async def list_dead_hosts() -> str:
        with tool_errors():
            return render_json(await client.list_dead_hosts())

    @mcp.tool(name="get_dead_host", description="Get details of a specific 404 host by ID", annotations=READ_ONLY)
    async def get_dead_host(
        id: Annotated[int, Field(description="The dead host ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_dead_host(id))

    @mcp.tool(
        name="create_dead_host",
        description="Create a new 404 host (shows 404 page for specified domains)",
        annotations=WRITE,
    )
    async def create_dead_host(
        domain_names: Annotated[list[str], Field(description="List of domain names")],
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID")] = None,
        ssl_forced: Annotated[bool, Field(description="Force SSL")] = False,
    ) -> str:
        with tool_errors():
            host = await client.create_dead_host(
                DeadHostCreate(domain_names=domain_names, certificate_id=certificate_id, ssl_forced=ssl_forced)
            )
            return f"Dead host created successfully:\n{render_json(host)}"

    @mcp.tool(
        name="update_dead_host",
        description="Update an existing 404 host. Only the fields given are changed.",
        annotations=WRITE,
    )
    async def update_dead_host(
        id: Annotated[int, Field(description="The dead host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="List of domain names")] = None,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID")] = None,
        ssl_forced: Annotated[bool | None, Field(description="Force SSL")] = None,
    ) -> str:
        with tool_errors():
            patch = DeadHostUpdate(
                **given(domain_names=domain_names, certificate_id=certificate_id, ssl_forced=ssl_forced)
            )
            host = await client.update_dead_host(id, patch)
            return f"Dead host updated successfully:\n{render_json(host)}"

    @mcp.tool(name="delete_dead_host", description="Delete a 404 host", annotations=DESTRUCTIVE)
    async def delete_dead_host(
        id: Annotated[int, Field(description="The dead host ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_dead_host(id)
            return f"Dead host {id} deleted successfully"

    @mcp.tool(name="enable_dead_host", description="Enable a 404 host", annotations=WRITE)
    async def enable_dead_host(
        id: Annotated[int, Field(description="The dead host ID to enable")],
    ) -> str:
        with tool_errors():
            await client.enable_dead_host(id)
            return f"Dead host {id} enabled successfully"

    @mcp.tool(name="disable_dead_host", description="Disable a 404 host", annotations=WRITE)
    async def disable_dead_host(
        id: Annotated[int, Field(description="The dead host ID to disable")],
    ) -> str:
        with tool_errors():
            await client.disable_dead_host(id)
            return f"Dead host {id} disabled successfully"
