"""MCP tool registrations.

Each module registers the tools for one resource family against a shared
NpmApiClient. Tool functions are thin: validate arguments, call the
client, render the result as text.
"""

from __future__ import annotations

__all__ = ["register_all_tools"]

from fastmcp import FastMCP

from npm_mcp.api.client import NpmApiClient
from npm_mcp.tools.access_lists import register_access_list_tools
from npm_mcp.tools.certificates import register_certificate_tools
from npm_mcp.tools.dead_hosts import register_dead_host_tools
from npm_mcp.tools.proxy_hosts import register_proxy_host_tools
from npm_mcp.tools.redirection_hosts import register_redirection_host_tools
from npm_mcp.tools.streams import register_stream_tools
from npm_mcp.tools.users import register_status_tools, register_user_tools


def register_all_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register every NPM tool on the server."""
    register_proxy_host_tools(mcp, client)
    register_certificate_tools(mcp, client)
    register_stream_tools(mcp, client)
    register_redirection_host_tools(mcp, client)
    register_dead_host_tools(mcp, client)
    register_access_list_tools(mcp, client)
    register_user_tools(mcp, client)
    register_status_tools(mcp, client)
