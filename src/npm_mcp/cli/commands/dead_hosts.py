"""404 host commands for npm-cli."""

from __future__ import annotations

__all__ = ["dead_hosts"]

import click

from npm_mcp.api.models import DeadHostCreate
from npm_mcp.cli.helpers import build_input, echo_json, npm_errors, parse_domains, parse_id, run_client_call


@click.group("dead-hosts")
def dead_hosts() -> None:
    """Manage 404 hosts."""


@dead_hosts.command("list")
def list_cmd() -> None:
    """List all 404 hosts."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_dead_hosts()))


@dead_hosts.command("get")
@click.argument("host_id")
def get_cmd(host_id: str) -> None:
    """Show one 404 host."""
    with npm_errors():
        pk = parse_id(host_id)
        echo_json(run_client_call(lambda client: client.get_dead_host(pk)))


@dead_hosts.command("create")
@click.option("--domains", help="Comma-separated domain names")
@click.option("--certificate-id", type=int, help="SSL certificate ID")
@click.option("--ssl-forced", is_flag=True, help="Force SSL")
def create_cmd(domains: str | None, certificate_id: int | None, ssl_forced: bool) -> None:
    """Create a 404 host."""
    with npm_errors():
        data = build_input(
            DeadHostCreate,
            domain_names=parse_domains(domains),
            certificate_id=certificate_id,
            ssl_forced=ssl_forced,
        )
        echo_json(run_client_call(lambda client: client.create_dead_host(data)))


@dead_hosts.command("delete")
@click.argument("host_id")
def delete_cmd(host_id: str) -> None:
    """Delete a 404 host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.delete_dead_host(pk))
    click.echo(f"Dead host {pk} deleted")


@dead_hosts.command("enable")
@click.argument("host_id")
def enable_cmd(host_id: str) -> None:
    """Enable a 404 host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.enable_dead_host(pk))
    click.echo(f"Dead host {pk} enabled")


@dead_hosts.command("disable")
@click.argument("host_id")
def disable_cmd(host_id: str) -> None:
    """Disable a 404 host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.disable_dead_host(pk))
    click.echo(f"Dead host {pk} disabled")
