"""Proxy host tools."""

from __future__ import annotations

__all__ = ["register_proxy_host_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.models import ForwardScheme, PortNumber, ProxyHostCreate, ProxyHostUpdate
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, given, tool_errors
from npm_mcp.utils.output import render_json


def register_proxy_host_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/create/update/delete/enable/disable tools for proxy hosts."""

    @mcp.tool(
        name="list_proxy_hosts",
        description="List all proxy hosts configured in Nginx Proxy Manager",
        annotations=READ_ONLY,
    )
    async def list_proxy_hosts() -> str:
        with tool_errors():
            return render_json(await client.list_proxy_hosts())

    @mcp.tool(
        name="get_proxy_host",
        description="Get details of a specific proxy host by ID",
        annotations=READ_ONLY,
    )
    async def get_proxy_host(
        id: Annotated[int, Field(description="The proxy host ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_proxy_host(id))

    @mcp.tool(
        name="create_proxy_host",
        description="Create a new proxy host to forward traffic from domain(s) to a backend server",
        annotations=WRITE,
    )
    async def create_proxy_host(
        domain_names: Annotated[list[str], Field(description="List of domain names (e.g., ['app.example.com'])")],
        forward_host: Annotated[str, Field(description="The backend host to forward to (e.g., '192.168.1.100')")],
        forward_port: Annotated[PortNumber, Field(description="The backend port to forward to (e.g., 8080)")],
        forward_scheme: Annotated[ForwardScheme, Field(description="Protocol to use when forwarding")] = "http",
        ssl_forced: Annotated[bool, Field(description="Force SSL/HTTPS for incoming requests")] = False,
        allow_websocket_upgrade: Annotated[bool, Field(description="Allow WebSocket connections")] = False,
        block_exploits: Annotated[bool, Field(description="Block common exploits")] = False,
        caching_enabled: Annotated[bool, Field(description="Enable caching")] = False,
        http2_support: Annotated[bool, Field(description="Enable HTTP/2 support")] = False,
        hsts_enabled: Annotated[bool, Field(description="Enable HSTS")] = False,
        hsts_subdomains: Annotated[bool, Field(description="Include subdomains in HSTS")] = False,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID to use")] = None,
        access_list_id: Annotated[int | None, Field(description="Access list ID to apply")] = None,
        advanced_config: Annotated[str | None, Field(description="Custom Nginx configuration")] = None,
    ) -> str:
        with tool_errors():
            host = await client.create_proxy_host(
                ProxyHostCreate(
                    domain_names=domain_names,
                    forward_host=forward_host,
                    forward_port=forward_port,
                    forward_scheme=forward_scheme,
                    ssl_forced=ssl_forced,
                    allow_websocket_upgrade=allow_websocket_upgrade,
                    block_exploits=block_exploits,
                    caching_enabled=caching_enabled,
                    http2_support=http2_support,
                    hsts_enabled=hsts_enabled,
                    hsts_subdomains=hsts_subdomains,
                    certificate_id=certificate_id,
                    access_list_id=access_list_id,
                    advanced_config=advanced_config,
                )
            )
            return f"Proxy host created successfully:\n{render_json(host)}"

    @mcp.tool(
        name="update_proxy_host",
        description="Update an existing proxy host. Only the fields given are changed.",
        annotations=WRITE,
    )
    async def update_proxy_host(
        id: Annotated[int, Field(description="The proxy host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="List of domain names")] = None,
        forward_host: Annotated[str | None, Field(description="The backend host")] = None,
        forward_port: Annotated[PortNumber | None, Field(description="The backend port")] = None,
        forward_scheme: Annotated[ForwardScheme | None, Field(description="Protocol")] = None,
        ssl_forced: Annotated[bool | None, Field(description="Force SSL")] = None,
        allow_websocket_upgrade: Annotated[bool | None, Field(description="Allow WebSocket")] = None,
        block_exploits: Annotated[bool | None, Field(description="Block exploits")] = None,
        caching_enabled: Annotated[bool | None, Field(description="Enable caching")] = None,
        http2_support: Annotated[bool | None, Field(description="Enable HTTP/2")] = None,
        hsts_enabled: Annotated[bool | None, Field(description="Enable HSTS")] = None,
        hsts_subdomains: Annotated[bool | None, Field(description="Include subdomains in HSTS")] = None,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID")] = None,
        access_list_id: Annotated[int | None, Field(description="Access list ID")] = None,
        advanced_config: Annotated[str | None, Field(description="Custom Nginx config")] = None,
    ) -> str:
        with tool_errors():
            patch = ProxyHostUpdate(
                **given(
                    domain_names=domain_names,
                    forward_host=forward_host,
                    forward_port=forward_port,
                    forward_scheme=forward_scheme,
                    ssl_forced=ssl_forced,
                    allow_websocket_upgrade=allow_websocket_upgrade,
                    block_exploits=block_exploits,
                    caching_enabled=caching_enabled,
                    http2_support=http2_support,
                    hsts_enabled=hsts_enabled,
                    hsts_subdomains=hsts_subdomains,
                    certificate_id=certificate_id,
                    access_list_id=access_list_id,
                    advanced_config=advanced_config,
                )
            )
            host = await client.update_proxy_host(id, patch)
            return f"Proxy host updated successfully:\n{render_json(host)}"

    @mcp.tool(name="delete_proxy_host", description="Delete a proxy host", annotations=DESTRUCTIVE)
    async def delete_proxy_host(
        id: Annotated[int, Field(description="The proxy host ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_proxy_host(id)
            return f"Proxy host {id} deleted successfully"

    @mcp.tool(name="enable_proxy_host", description="Enable a proxy host", annotations=WRITE)
    async def enable_proxy_host(
        id: Annotated[int, Field(description="The proxy host ID to enable")],
    ) -> str:
        with tool_errors():
            await client.enable_proxy_host(id)
            return f"Proxy host {id} enabled successfully"

    @mcp.tool(name="disable_proxy_host", description="Disable a proxy host", annotations=WRITE)
    async def disable_proxy_host(
        id: Annotated[int, Field(description="The proxy host ID to disable")],
    ) -> str:
        with tool_errors():
            await client.disable_proxy_host(id)
            return f"Proxy host {id} disabled successfully"
