"""Access list tools."""

from __future__ import annotations

__all__ = ["register_access_list_tools"]

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.models import AccessListClient, AccessListCreate, AccessListItem, AccessListUpdate
from npm_mcp.tools.common import DESTRUCTIVE, READ_ONLY, WRITE, given, tool_errors
from npm_mcp.utils.output import render_json


def register_access_list_tools(mcp: FastMCP, client: NpmApiClient) -> None:
    """Register list/get/create/update/delete tools for access lists."""

    @mcp.tool(name="list_access_lists", description="List all access lists", annotations=READ_ONLY)
    async def list_access_lists() -> str:
        with tool_errors():
            return render_json(await client.list_access_lists())

    @mcp.tool(name="get_access_list", description="Get details of a specific access list by ID", annotations=READ_ONLY)
    async def get_access_list(
        id: Annotated[int, Field(description="The access list ID")],
    ) -> str:
        with tool_errors():
            return render_json(await client.get_access_list(id))

    @mcp.tool(
        name="create_access_list",
        description="Create a new access list for authentication or IP-based access control",
        annotations=WRITE,
    )
    async def create_access_list(
        name: Annotated[str, Field(description="Name for the access list")],
        satisfy_any: Annotated[bool, Field(description="Satisfy any or all conditions")] = False,
        pass_auth: Annotated[bool, Field(description="Pass auth to upstream")] = False,
        items: Annotated[
            list[AccessListItem] | None, Field(description="Basic-auth users (username/password)")
        ] = None,
        clients: Annotated[
            list[AccessListClient] | None, Field(description="IP rules (address + allow/deny directive)")
        ] = None,
    ) -> str:
        with tool_errors():
            access_list = await client.create_access_list(
                AccessListCreate(
                    name=name,
                    satisfy_any=satisfy_any,
                    pass_auth=pass_auth,
                    items=items,
                    clients=clients,
                )
            )
            return f"Access list created successfully:\n{render_json(access_list)}"

    @mcp.tool(
        name="update_access_list",
        description="Update an existing access list. Only the fields given are changed.",
        annotations=WRITE,
    )
    async def update_access_list(
        id: Annotated[int, Field(description="The access list ID to update")],
        name: Annotated[str | None, Field(description="Name for the access list")] = None,
        satisfy_any: Annotated[bool | None, Field(description="Satisfy any or all conditions")] = None,
        pass_auth: Annotated[bool | None, Field(description="Pass auth to upstream")] = None,
        items: Annotated[list[AccessListItem] | None, Field(description="Basic-auth users")] = None,
        clients: Annotated[list[AccessListClient] | None, Field(description="IP rules")] = None,
    ) -> str:
        with tool_errors():
            patch = AccessListUpdate(
                **given(name=name, satisfy_any=satisfy_any, pass_auth=pass_auth, items=items, clients=clients)
            )
            access_list = await client.update_access_list(id, patch)
            return f"Access list updated successfully:\n{render_json(access_list)}"

    @mcp.tool(name="delete_access_list", description="Delete an access list", annotations=DESTRUCTIVE)
    async def delete_access_list(
        id: Annotated[int, Field(description="The access list ID to delete")],
    ) -> str:
        with tool_errors():
            await client.delete_access_list(id)
            return f"Access list {id} deleted successfully"
