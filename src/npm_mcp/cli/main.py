"""Main CLI entry point for npm-cli.

Defines the CLI group and registers all subcommands.

Commands:
    access-lists  - Access lists (list, get, create, delete)
    certificates  - SSL certificates (list, get, renew, delete)
    dead-hosts    - 404 hosts (list, get, create, delete, enable, disable)
    proxy-hosts   - Proxy hosts (list, get, create, update, delete, enable, disable)
    redirections  - Redirection hosts (list, get, create, delete, enable, disable)
    status        - NPM health, version and mode
    streams       - TCP/UDP streams (list, get, create, delete, enable, disable)
    users         - Users (list, get)

Subcommand help:
    npm-cli COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli"]

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click

from npm_mcp import __version__
from npm_mcp.constants import CLI_NAME

from .commands.access_lists import access_lists
from .commands.certificates import certificates
from .commands.dead_hosts import dead_hosts
from .commands.proxy_hosts import proxy_hosts
from .commands.redirections import redirections
from .commands.status import status
from .commands.streams import streams
from .commands.users import users


@contextmanager
def _usage_errors_exit_one() -> Iterator[None]:
    # every failure of npm-cli exits 1, usage errors included
    try:
        yield
    except click.UsageError as e:
        e.exit_code = 1
        raise


class NpmGroup(click.Group):
    """Root group: unknown commands print the full usage instead of failing."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            click.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        with _usage_errors_exit_one():
            return super().parse_args(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        with _usage_errors_exit_one():
            return super().invoke(ctx)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add environment variables after commands section."""
        formatter.write(
            """
Examples:
  npm-cli proxy-hosts list
  npm-cli proxy-hosts create --domains app.example.com \\
    --forward-host 192.168.1.100 --forward-port 8080
  npm-cli streams create --incoming-port 2222 \\
    --forward-host 10.0.0.5 --forward-port 22
  npm-cli certificates renew 3

Environment Variables:
  NPM_URL          NPM URL (default: http://localhost:81)
  NPM_EMAIL        Admin email (required)
  NPM_PASSWORD     Admin password (required)
  NPM_READONLY     Set to "true" to block all write operations
  NPM_TIMEOUT      Request timeout in seconds (default: none)
  NPM_LOG_LEVEL    Log level on stderr (default: WARNING)
  NPM_LOG_FILE     Optional JSONL log file
"""
        )


@click.group(
    cls=NpmGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """npm-cli: Manage Nginx Proxy Manager from the command line."""
    if version:
        click.echo(f"{CLI_NAME} {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(access_lists)
cli.add_command(certificates)
cli.add_command(dead_hosts)
cli.add_command(proxy_hosts)
cli.add_command(redirections)
cli.add_command(status)
cli.add_command(streams)
cli.add_command(users)


def main() -> None:
    """CLI entry point."""
    cli()
