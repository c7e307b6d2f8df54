"""Proxy host commands for npm-cli."""

from __future__ import annotations

__all__ = ["proxy_hosts"]

import click

from npm_mcp.api.models import ProxyHostCreate, ProxyHostUpdate
from npm_mcp.cli.helpers import build_input, echo_json, npm_errors, parse_domains, parse_id, run_client_call


@click.group("proxy-hosts")
def proxy_hosts() -> None:
    """Manage proxy hosts (domain -> backend forwarding)."""


@proxy_hosts.command("list")
def list_cmd() -> None:
    """List all proxy hosts."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_proxy_hosts()))


@proxy_hosts.command("get")
@click.argument("host_id")
def get_cmd(host_id: str) -> None:
    """Show one proxy host."""
    with npm_errors():
        pk = parse_id(host_id)
        echo_json(run_client_call(lambda client: client.get_proxy_host(pk)))


@proxy_hosts.command("create")
@click.option("--domains", help="Comma-separated domain names")
@click.option("--forward-host", help="Backend host")
@click.option("--forward-port", type=int, default=80, show_default=True, help="Backend port")
@click.option(
    "--forward-scheme",
    type=click.Choice(["http", "https"]),
    default="http",
    show_default=True,
    help="Protocol used towards the backend",
)
@click.option("--ssl-forced", is_flag=True, help="Force SSL")
@click.option("--websocket", is_flag=True, help="Allow WebSocket upgrade")
@click.option("--block-exploits", is_flag=True, help="Block common exploits")
@click.option("--caching", is_flag=True, help="Enable caching")
@click.option("--http2", is_flag=True, help="Enable HTTP/2")
@click.option("--hsts", is_flag=True, help="Enable HSTS")
@click.option("--certificate-id", type=int, help="SSL certificate ID")
@click.option("--access-list-id", type=int, help="Access list ID")
def create_cmd(
    domains: str | None,
    forward_host: str | None,
    forward_port: int,
    forward_scheme: str,
    ssl_forced: bool,
    websocket: bool,
    block_exploits: bool,
    caching: bool,
    http2: bool,
    hsts: bool,
    certificate_id: int | None,
    access_list_id: int | None,
) -> None:
    """Create a proxy host.

    Example:
        npm-cli proxy-hosts create --domains app.example.com \\
            --forward-host 10.0.0.5 --forward-port 8080
    """
    with npm_errors():
        data = build_input(
            ProxyHostCreate,
            domain_names=parse_domains(domains),
            forward_host=forward_host,
            forward_port=forward_port,
            forward_scheme=forward_scheme,
            ssl_forced=ssl_forced,
            allow_websocket_upgrade=websocket,
            block_exploits=block_exploits,
            caching_enabled=caching,
            http2_support=http2,
            hsts_enabled=hsts,
            certificate_id=certificate_id,
            access_list_id=access_list_id,
        )
        echo_json(run_client_call(lambda client: client.create_proxy_host(data)))


@proxy_hosts.command("update")
@click.argument("host_id")
@click.option("--domains", help="Comma-separated domain names")
@click.option("--forward-host", help="Backend host")
@click.option("--forward-port", type=int, help="Backend port")
@click.option("--forward-scheme", type=click.Choice(["http", "https"]), help="Protocol used towards the backend")
@click.option("--ssl-forced/--no-ssl-forced", default=None, help="Force SSL")
@click.option("--websocket/--no-websocket", default=None, help="Allow WebSocket upgrade")
@click.option("--block-exploits/--no-block-exploits", default=None, help="Block common exploits")
@click.option("--caching/--no-caching", default=None, help="Enable caching")
@click.option("--http2/--no-http2", default=None, help="Enable HTTP/2")
@click.option("--hsts/--no-hsts", default=None, help="Enable HSTS")
@click.option("--certificate-id", type=int, help="SSL certificate ID")
@click.option("--access-list-id", type=int, help="Access list ID")
def update_cmd(
    host_id: str,
    domains: str | None,
    forward_host: str | None,
    forward_port: int | None,
    forward_scheme: str | None,
    ssl_forced: bool | None,
    websocket: bool | None,
    block_exploits: bool | None,
    caching: bool | None,
    http2: bool | None,
    hsts: bool | None,
    certificate_id: int | None,
    access_list_id: int | None,
) -> None:
    """Update a proxy host. Only the options given are changed."""
    with npm_errors():
        pk = parse_id(host_id)
        patch = build_input(
            ProxyHostUpdate,
            domain_names=parse_domains(domains) if domains is not None else None,
            forward_host=forward_host,
            forward_port=forward_port,
            forward_scheme=forward_scheme,
            ssl_forced=ssl_forced,
            allow_websocket_upgrade=websocket,
            block_exploits=block_exploits,
            caching_enabled=caching,
            http2_support=http2,
            hsts_enabled=hsts,
            certificate_id=certificate_id,
            access_list_id=access_list_id,
        )
        echo_json(run_client_call(lambda client: client.update_proxy_host(pk, patch)))


@proxy_hosts.command("delete")
@click.argument("host_id")
def delete_cmd(host_id: str) -> None:
    """Delete a proxy host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.delete_proxy_host(pk))
    click.echo(f"Proxy host {pk} deleted")


@proxy_hosts.command("enable")
@click.argument("host_id")
def enable_cmd(host_id: str) -> None:
    """Enable a proxy host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.enable_proxy_host(pk))
    click.echo(f"Proxy host {pk} enabled")


@proxy_hosts.command("disable")
@click.argument("host_id")
def disable_cmd(host_id: str) -> None:
    """Disable a proxy host."""
    with npm_errors():
        pk = parse_id(host_id)
        run_client_call(lambda client: client.disable_proxy_host(pk))
    click.echo(f"Proxy host {pk} disabled")
