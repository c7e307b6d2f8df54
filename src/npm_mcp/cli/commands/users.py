"""User commands for npm-cli."""

from __future__ import annotations

__all__ = ["users"]

import click

from npm_mcp.cli.helpers import echo_json, npm_errors, parse_id, run_client_call


@click.group("users")
def users() -> None:
    """Inspect NPM user accounts."""


@users.command("list")
def list_cmd() -> None:
    """List all users."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_users()))


@users.command("get")
@click.argument("user_id")
def get_cmd(user_id: str) -> None:
    """Show one user."""
    with npm_errors():
        pk = parse_id(user_id)
        echo_json(run_client_call(lambda client: client.get_user(pk)))
