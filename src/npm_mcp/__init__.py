"""npm-mcp: Nginx Proxy Manager tools for MCP clients, plus a CLI.

Entry points:
    npm-mcp   MCP server on stdio (npm_mcp.server:main)
    npm-cli   command-line interface (npm_mcp.cli:main)
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
