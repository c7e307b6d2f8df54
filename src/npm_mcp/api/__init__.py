"""Nginx Proxy Manager API layer.

- client: NpmApiClient, the async client both dispatchers are built on
- models: pydantic models for remote resources and request inputs
- token: SessionToken and its lifecycle states
"""

from npm_mcp.api.client import NpmApiClient
from npm_mcp.api.token import SessionToken, TokenState

__all__ = [
    "NpmApiClient",
    "SessionToken",
    "TokenState",
]
