"""Helpers shared by the MCP tool modules."""

from __future__ import annotations

__all__ = [
    "DESTRUCTIVE",
    "READ_ONLY",
    "WRITE",
    "given",
    "tool_errors",
]

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from npm_mcp.exceptions import NpmError

READ_ONLY = ToolAnnotations(readOnlyHint=True, openWorldHint=True)
WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, openWorldHint=True)
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True, openWorldHint=True)


@contextmanager
def tool_errors() -> Iterator[None]:
    """Turn client errors into MCP error results.

    FastMCP reports a ToolError as a tool result with isError set and the
    message as its text content.
    """
    try:
        yield
    except NpmError as e:
        raise ToolError(f"Error: {e}") from e
    except ValidationError as e:
        raise ToolError(f"Error: invalid input: {e}") from e


def given(**fields: Any) -> dict[str, Any]:
    """Keep only the arguments the caller actually supplied (non-None)."""
    return {name: value for name, value in fields.items() if value is not None}
