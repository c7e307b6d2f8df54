"""Stream commands for npm-cli."""

from __future__ import annotations

__all__ = ["streams"]

import click

from npm_mcp.api.models import StreamCreate
from npm_mcp.cli.helpers import build_input, echo_json, npm_errors, parse_id, run_client_call


@click.group("streams")
def streams() -> None:
    """Manage TCP/UDP streams."""


@streams.command("list")
def list_cmd() -> None:
    """List all streams."""
    with npm_errors():
        echo_json(run_client_call(lambda client: client.list_streams()))


@streams.command("get")
@click.argument("stream_id")
def get_cmd(stream_id: str) -> None:
    """Show one stream."""
    with npm_errors():
        pk = parse_id(stream_id)
        echo_json(run_client_call(lambda client: client.get_stream(pk)))


@streams.command("create")
@click.option("--incoming-port", type=int, help="Port to listen on")
@click.option("--forward-host", help="Backend host")
@click.option("--forward-port", type=int, help="Backend port")
@click.option("--tcp/--no-tcp", default=True, show_default=True, help="Forward TCP")
@click.option("--udp", is_flag=True, help="Forward UDP")
def create_cmd(
    incoming_port: int | None,
    forward_host: str | None,
    forward_port: int | None,
    tcp: bool,
    udp: bool,
) -> None:
    """Create a stream."""
    with npm_errors():
        data = build_input(
            StreamCreate,
            incoming_port=incoming_port,
            forwarding_host=forward_host,
            forwarding_port=forward_port,
            tcp_forwarding=tcp,
            udp_forwarding=udp,
        )
        echo_json(run_client_call(lambda client: client.create_stream(data)))


@streams.command("delete")
@click.argument("stream_id")
def delete_cmd(stream_id: str) -> None:
    """Delete a stream."""
    with npm_errors():
        pk = parse_id(stream_id)
        run_client_call(lambda client: client.delete_stream(pk))
    click.echo(f"Stream {pk} deleted")


@streams.command("enable")
@click.argument("stream_id")
def enable_cmd(stream_id: str) -> None:
    """Enable a stream."""
    with npm_errors():
        pk = parse_id(stream_id)
        run_client_call(lambda client: client.enable_stream(pk))
    click.echo(f"Stream {pk} enabled")


@streams.command("disable")
@click.argument("stream_id")
def disable_cmd(stream_id: str) -> None:
    """Disable a stream."""
    with npm_errors():
        pk = parse_id(stream_id)
        run_client_call(lambda client: client.disable_stream(pk))
    click.echo(f"Stream {pk} disabled")
