"""Certificate commands for npm-cli."""

from __future__ import annotations

__all__ = ["certificates"]

import click

from npm_mcp.cli.helpers import echo_json, npm_errors, parse_id, run_client_call


@click.group("certificates")
def certificates() -> None:
    """Manage SSL certificates."""


@certificates.command("list")
def list_cmd() -> None:
    """List all certificates."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_certificates()))


@certificates.command("get")
@click.argument("certificate_id")
def get_cmd(certificate_id: str) -> None:
    """Show one certificate."""
    with npm_errors():
        pk = parse_id(certificate_id)
        echo_json(run_client_call(lambda client: client.get_certificate(pk)))


@certificates.command("renew")
@click.argument("certificate_id")
def renew_cmd(certificate_id: str) -> None:
    """Renew a certificate."""
    with npm_errors():
        pk = parse_id(certificate_id)
        echo_json(run_client_call(lambda client: client.renew_certificate(pk)))


@certificates.command("delete")
@click.argument("certificate_id")
def delete_cmd(certificate_id: str) -> None:
    """Delete a certificate."""
    with npm_errors():
        pk = parse_id(certificate_id)
        run_client_call(lambda client: client.delete_certificate(pk))
    click.echo(f"Certificate {pk} deleted")
