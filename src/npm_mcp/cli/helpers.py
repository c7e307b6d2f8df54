"""Shared helpers for CLI commands.

Every command follows the same shape: parse ids and options, build the
input model, run one client call, print the result. Errors raised on the
way are NpmErrors and leave the CLI as a ClickException ("Error: ...",
exit 1).
"""

from __future__ import annotations

__all__ = [
    "build_input",
    "echo_json",
    "npm_errors",
    "parse_domains",
    "parse_id",
    "run_client_call",
]

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import click
from pydantic import BaseModel, ValidationError

from npm_mcp.api.client import NpmApiClient
from npm_mcp.config import NpmConfig
from npm_mcp.constants import DEFAULT_CLI_LOG_LEVEL
from npm_mcp.exceptions import InvalidInputError, NpmError
from npm_mcp.utils.logging import configure_logging
from npm_mcp.utils.output import render_json

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


class NpmClickError(click.ClickException):
    """ClickException carrying the exit code of the NpmError it wraps."""

    def __init__(self, error: NpmError) -> None:
        super().__init__(str(error))
        self.exit_code = error.exit_code
        self.kind = error.kind


@contextmanager
def npm_errors() -> Iterator[None]:
    """Convert NpmError into a ClickException for the enclosed block."""
    try:
        yield
    except NpmError as e:
        raise NpmClickError(e) from e


def parse_id(value: str) -> int:
    """Parse a positional resource id.

    Raises:
        InvalidInputError: If the value is not an integer.
    """
    try:
        return int(value)
    except ValueError:
        raise InvalidInputError(f"Invalid ID: {value!r}") from None


def parse_domains(value: str | None) -> list[str]:
    """Split a comma-separated --domains value, dropping empty entries."""
    if not value:
        return []
    return [domain.strip() for domain in value.split(",") if domain.strip()]


def build_input(model: type[ModelT], **fields: Any) -> ModelT:
    """Validate CLI options into an input model.

    Options left at None are omitted so the model's own defaults apply.

    Raises:
        InvalidInputError: If the options do not form a valid request.
    """
    try:
        return model.model_validate({name: value for name, value in fields.items() if value is not None})
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}" for err in e.errors()
        )
        raise InvalidInputError(f"Invalid input: {problems}") from e


def run_client_call(call: Callable[[NpmApiClient], Awaitable[T]]) -> T:
    """Load configuration, open a client, run one call and close the client.

    Args:
        call: Receives the client and returns the awaitable to run.

    Returns:
        Whatever the awaitable returns.

    Raises:
        NpmError: Configuration, authentication, readonly or remote failures.
    """
    config = NpmConfig.from_env(default_log_level=DEFAULT_CLI_LOG_LEVEL)
    configure_logging(config.log_level, config.log_file)

    async def _run() -> T:
        async with NpmApiClient(config) as client:
            return await call(client)

    return asyncio.run(_run())


def echo_json(result: Any) -> None:
    """Print a client result as indented JSON on stdout."""
    click.echo(render_json(result))
