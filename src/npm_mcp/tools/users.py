"""User and status tools."""

from __future__ import annotations

__all__ = ["register_status_tools", "register_user_tools"]

import json
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.tools.common import READ_ONLY, tool_errors
from npm_mcp.utils.output import build_status, render_json


def register_user_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get tools for users."""

    @mcp.tool(name="list_users", description="List all users in Nginx Proxy Manager", annotations=READ_ONLY)
    async def list_users() -> str:
        with tool_errors():
            return render_json(await client.list_users())

    @mcp.tool(name="get_user", description="Get details of a specific user by ID", annotations=READ_ONLY)
    async def get_user(
        id: Annotated[int, Field(description="The user ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_user(id))


def register_status_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register the get_status tool."""

    @mcp.tool(
        name="get_status",
        description="Get the health status, version, and mode of Nginx Proxy Manager MCP server",
        annotations=READ_ONLY,
    )
    async def get_status() -> str:
        with tool_errors():
            health = await client.get_health()
            return json.dumps(build_status(health, client.is_readonly), indent=2)
