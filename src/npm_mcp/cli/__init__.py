"""Command-line interface for npm-mcp.

Provides one command group per NPM resource family, driving the same
NpmApiClient the MCP server uses.
"""

from .main import cli, main

__all__ = ["cli", "main"]
