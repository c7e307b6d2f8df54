"""MCP server entry point for Nginx Proxy Manager.

Builds a FastMCP server exposing one tool per client operation and runs it
over stdio. The server owns a single NpmApiClient for its whole lifetime and
closes it on shutdown.

Startup:
    1. Load NpmConfig from the environment (missing credentials are fatal)
    2. Configure logging (stderr, optional JSONL file; an unusable file is fatal)
    3. Register tools and run the stdio transport
"""

from __future__ import annotations

__all__ = [
    "create_server",
    "main",
]

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import click
from fastmcp import FastMCP

from npm_mcp import __version__
from npm_mcp.api.client import NpmApiClient
from npm_mcp.config import NpmConfig
from npm_mcp.constants import SERVER_NAME
from npm_mcp.exceptions import ConfigurationError
from npm_mcp.tools import register_all_tools
from npm_mcp.utils.logging import configure_logging, get_logger

_logger = get_logger("server")


def create_server(client: NpmApiClient) -> FastMCP:
    """Create the MCP server and register all tools.

    Args:
        client: Client every tool call goes through. Closed when the server
            shuts down.

    Returns:
        Configured FastMCP server (not yet running).
    """

    # one client per server: only valid for stdio, which runs the lifespan once
    @asynccontextmanager
    async def server_lifespan(app: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await client.aclose()

    mcp = FastMCP(SERVER_NAME, version=__version__, lifespan=server_lifespan)
    register_all_tools(mcp, client)
    return mcp


def main() -> None:
    """Run the MCP server over stdio."""
    try:
        config = NpmConfig.from_env()
        configure_logging(config.log_level, config.log_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    client = NpmApiClient(config)
    mcp = create_server(client)

    _logger.info(
        {
            "event": "server_starting",
            "message": f"Nginx Proxy Manager MCP server starting ({client.base_url})",
            "version": __version__,
            "npm_url": client.base_url,
        }
    )
    if client.is_readonly:
        _logger.warning(
            {
                "event": "readonly_mode",
                "message": "Running in READONLY mode - write operations are disabled",
            }
        )

    mcp.run()


if __name__ == "__main__":
    main()
