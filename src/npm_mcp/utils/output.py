"""Result rendering shared by the MCP tools and the CLI.

Both dispatchers print client results the same way, so the shaping lives
here rather than in either of them.
"""

from __future__ import annotations

__all__ = [
    "build_status",
    "render_json",
    "to_jsonable",
]

import json
from typing import Any

from pydantic import BaseModel

from npm_mcp.api.models import HealthStatus


def to_jsonable(result: Any) -> Any:
    """Convert a client result into plain JSON-compatible data.

    Models are dumped with only the fields the server actually sent, so the
    output mirrors the remote payload rather than the model's full schema.
    """
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", exclude_unset=True)
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    if result is None:
        return {}
    return result


def render_json(result: Any) -> str:
    """Render a client result as indented JSON text."""
    return json.dumps(to_jsonable(result), indent=2)


def build_status(health: HealthStatus, readonly: bool) -> dict[str, Any]:
    """Merge the NPM health payload with this server's mode.

    Args:
        health: Result of NpmApiClient.get_health().
        readonly: Whether the client is in readonly mode.

    Returns:
        Health fields plus an "mcp_server" section.
    """
    return {
        **to_jsonable(health),
        "mcp_server": {
            "readonly": readonly,
            "mode": "readonly" if readonly else "read-write",
        },
    }
