"""Stream (TCP/UDP forwarding) tools."""

from __future__ import annotations

__all__ = ["register_stream_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.models import PortNumber, StreamCreate, StreamUpdate
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, given, tool_errors
from npm_mcp.utils.output import render_json


def register_stream_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/create/update/delete/enable/disable tools for streams."""

    @mcp.tool(name="list_streams", description="List all TCP/UDP stream configurations", annotations=READ_ONLY)
    async def list_streams() -> str:
        with tool_errors():
            return render_json(await client.list_streams())

    @mcp.tool(name="get_stream", description="Get details of a specific stream by ID", annotations=READ_ONLY)
    async def get_stream(
        id: Annotated[int, Field(description="The stream ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_stream(id))

    @mcp.tool(
        name="create_stream",
        description="Create a new TCP/UDP stream to forward traffic on a specific port",
        annotations=WRITE,
    )
    async def create_stream(
        incoming_port: Annotated[PortNumber, Field(description="The port to listen on")],
        forwarding_host: Annotated[str, Field(description="The backend host to forward to")],
        forwarding_port: Annotated[PortNumber, Field(description="The backend port to forward to")],
        tcp_forwarding: Annotated[bool, Field(description="Enable TCP forwarding")] = True,
        udp_forwarding: Annotated[bool, Field(description="Enable UDP forwarding")] = False,
    ) -> str:
        with tool_errors():
            stream = await client.create_stream(
                StreamCreate(
                    incoming_port=incoming_port,
                    forwarding_host=forwarding_host,
                    forwarding_port=forwarding_port,
                    tcp_forwarding=tcp_forwarding,
                    udp_forwarding=udp_forwarding,
                )
            )
            return f"Stream created successfully:\n{render_json(stream)}"

    @mcp.tool(
        name="update_stream",
        description="Update an existing stream. Only the fields given are changed.",
        annotations=WRITE,
    )
    async def update_stream(
        id: Annotated[int, Field(description="The stream ID to update")],
        incoming_port: Annotated[PortNumber | None, Field(description="The port to listen on")] = None,
        forwarding_host: Annotated[str | None, Field(description="The backend host")] = None,
        forwarding_port: Annotated[PortNumber | None, Field(description="The backend port")] = None,
        tcp_forwarding: Annotated[bool | None, Field(description="Enable TCP forwarding")] = None,
        udp_forwarding: Annotated[bool | None, Field(description="Enable UDP forwarding")] = None,
    ) -> str:
        with tool_errors():
            patch = StreamUpdate(
                **given(
                    incoming_port=incoming_port,
                    forwarding_host=forwarding_host,
                    forwarding_port=forwarding_port,
                    tcp_forwarding=tcp_forwarding,
                    udp_forwarding=udp_forwarding,
                )
            )
            stream = await client.update_stream(id, patch)
            return f"Stream updated successfully:\n{render_json(stream)}"

    @mcp.tool(name="delete_stream", description="Delete a stream", annotations=DESTRUCTIVE)
    async def delete_stream(
        id: Annotated[int, Field(description="The stream ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_stream(id)
            return f"Stream {id} deleted successfully"

    @mcp.tool(name="enable_stream", description="Enable a stream", annotations=WRITE)
    async def enable_stream(
        id: Annotated[int, Field(description="The stream ID to enable")],
    ) -> str:
        with tool_errors():
            await client.enable_stream(id)
            return f"Stream {id} enabled successfully"

    @mcp.tool(name="disable_stream", description="Disable a stream", annotations=WRITE)
    async def disable_stream(
        id: Annotated[int, Field(description="The stream ID to disable")],
    ) -> str:
        with tool_errors():
            await client.disable_stream(id)
            return f"Stream {id} disabled successfully"
