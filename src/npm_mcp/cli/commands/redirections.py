"""Redirection host commands for npm-cli."""

from __future__ import annotations

__all__ = ["redirections"]

import click

from npm_mcp.api.models import RedirectionHostCreate
from npm_mcp.cli.helpers import build_input, echo_json, npm_errors, parse_domains, parse_id, run_client_call


@click.group("redirections")
def redirections() -> None:
    """Manage redirection hosts."""


@redirections.command("list")
def list_cmd() -> None:
    """List all redirection hosts."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_redirection_hosts()))


@redirections.command("get")
@click.argument("host_id")
def get_cmd(host_id: str) -> None:
    """Show one redirection host."""
    with npm_errors():
        pk = parse_id(host_id)
        echo_json(run_client_call(lambda client: client.get_redirection_host(pk)))


@redirections.command("create")
@click.option("--domains", help="Comma-separated source domain names")
@click.option("--forward-domain", help="Target domain")
@click.option(
    "--forward-scheme",
    type=click.Choice(["http", "https", "$scheme"]),
    default="$scheme",
    show_default=True,
    help="Scheme of the redirect target",
)
@click.option("--http-code", type=int, default=301, show_default=True, help="HTTP redirect code")
@click.option("--preserve-path/--no-preserve-path", default=True, show_default=True, help="Keep the request path")
def create_cmd(
    domains: str | None,
    forward_domain: str | None,
    forward_scheme: str,
    http_code: int,
    preserve_path: bool,
) -> None:
    """Create a redirection host."""
    with npm_errors():
        data = build_input(
            RedirectionHostCreate,
            domain_names=parse_domains(domains),
            forward_domain_name=forward_domain,
            forward_scheme=forward_scheme,
            forward_http_code=http_code,
            preserve_path=preserve_path,
        )
        echo_json(run_client_call(lambda client: client.create_redirection_host(data)))


@redirections.command("delete")
@click.argument("host_id")
def delete_cmd(host_id: str) -> None:
    """Delete a redirection host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.delete_redirection_host(pk))
    click.echo(f"Redirection host {pk} deleted")


@redirections.command("enable")
@click.argument("host_id")
def enable_cmd(host_id: str) -> None:
    """Enable a redirection host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.enable_redirection_host(pk))
    click.echo(f"Redirection host {pk} enabled")


@redirections.command("disable")
@click.argument("host_id")
def disable_cmd(host_id: str) -> None:
    """Disable a redirection host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.disable_redirection_host(pk))
    click.echo(f"Redirection host {pk} disabled")
