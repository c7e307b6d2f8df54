"""Status command for npm-cli.

Prints the NPM health payload plus the mode this tool runs in.
"""

from __future__ import annotations

__all__ = ["status"]

import json
from typing import Any

import click

from npm_mcp.api.client import NpmApiClient
from npm_mcp.cli.helpers import npm_errors, run_client_call
from npm_mcp.utils.output import build_status


@click.command()
def status() -> None:
    """Show NPM health, version and readonly mode."""

    async def fetch(client: NpmApiClient) -> dict[str, Any]:
        return build_status(await client.get_health(), client.is_readonly)

    with npm_errors():
        result = run_client_call(fetch)
    click.echo(json.dumps(result, indent=2))
