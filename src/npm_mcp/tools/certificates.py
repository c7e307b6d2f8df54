"""Certificate tools."""

from __future__ import annotations

__all__ = ["register_certificate_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, tool_errors
from npm_mcp.utils.output import render_json


def register_certificate_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/renew/delete tools for SSL certificates."""

    @mcp.tool(name="list_certificates", description="List all SSL certificates", annotations=READ_ONLY)
    async def list_certificates() -> str:
        with tool_errors():
            return render_json(await client.list_certificates())

    @mcp.tool(name="get_certificate", description="Get details of a specific certificate", annotations=READ_ONLY)
    async def get_certificate(
        id: Annotated[int, Field(description="The certificate ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_certificate(id))

    @mcp.tool(name="renew_certificate", description="Renew an SSL certificate", annotations=WRITE)
    async def renew_certificate(
        id: Annotated[int, Field(description="The certificate ID to renew")],
    ) -> str:
        with tool_errors():
            certificate = await client.renew_certificate(id)
            return f"Certificate renewed successfully:\n{render_json(certificate)}"

    @mcp.tool(name="delete_certificate", description="Delete an SSL certificate", annotations=DESTRUCTIVE)
    async def delete_certificate(
        id: Annotated[int, Field(description="The certificate ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_certificate(id)
            return f"Certificate {id} deleted successfully"
