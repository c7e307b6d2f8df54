"""Access list commands for npm-cli."""

from __future__ import annotations

__all__ = ["access_lists"]

import click

from npm_mcp.api.models import AccessListCreate
from npm_mcp.cli.helpers import build_input, echo_json, npm_errors, parse_id, run_client_call


@click.group("access-lists")
def access_lists() -> None:
    """Manage access lists."""


@access_lists.command("list")
def list_cmd() -> None:
    """List all access lists."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_access_lists()))


@access_lists.command("get")
@click.argument("list_id")
def get_cmd(list_id: str) -> None:
    """Show one access list."""
    with npm_errors():
        pk = parse_id(list_id)
        echo_json(run_client_call(lambda client: client.get_access_list(pk)))


@access_lists.command("create")
@click.option("--name", default="New Access List", show_default=True, help="Access list name")
@click.option("--satisfy-any", is_flag=True, help="Grant access when any rule matches")
@click.option("--pass-auth", is_flag=True, help="Pass the Authorization header upstream")
def create_cmd(name: str, satisfy_any: bool, pass_auth: bool) -> None:
    """Create an access list (without credentials or IP rules)."""
    with npm_errors():
        data = build_input(AccessListCreate, name=name, satisfy_any=satisfy_any, pass_auth=pass_auth)
        echo_json(run_client_call(lambda client: client.create_access_list(data)))


@access_lists.command("delete")
@click.argument("list_id")
def delete_cmd(list_id: str) -> None:
    """Delete an access list."""
    with npm_errors():
        pk = parse_id(list_id)
        run_client_call(lambda client: client.delete_access_list(pk))
    click.echo(f"Access list {pk} deleted")
