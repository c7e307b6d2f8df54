"""Application configuration for npm-mcp.

All settings come from environment variables; there is no config file.
Both entry points (MCP server and CLI) build an NpmConfig at startup and
treat a ConfigurationError as fatal.

Example usage:
    config = NpmConfig.from_env()
    client = NpmApiClient(config)
"""

from __future__ import annotations

__all__ = [
    "LogLevel",
    "NpmConfig",
]

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from npm_mcp.constants import (
    DEFAULT_NPM_URL,
    DEFAULT_SERVER_LOG_LEVEL,
    ENV_EMAIL,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_PASSWORD,
    ENV_READONLY,
    ENV_TIMEOUT,
    ENV_URL,
    READONLY_TRUE_VALUE,
)
from npm_mcp.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NpmConfig(BaseModel):
    """Connection and runtime settings for one Nginx Proxy Manager instance.

    Attributes:
        url: Base URL of the NPM admin interface (trailing slash stripped).
        email: Login identity.
        password: Login secret.
        readonly: Block all mutating operations when True.
        timeout: Request timeout in seconds. None means no timeout.
        log_level: Logging level for the stderr console handler.
        log_file: Optional path of a JSONL log file.
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_NPM_URL
    email: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    readonly: bool = False
    timeout: float | None = Field(default=None, gt=0)
    log_level: LogLevel = DEFAULT_SERVER_LOG_LEVEL
    log_file: str | None = None

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        default_log_level: LogLevel = DEFAULT_SERVER_LOG_LEVEL,
    ) -> "NpmConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).
            default_log_level: Level used when NPM_LOG_LEVEL is unset.

        Returns:
            Validated NpmConfig.

        Raises:
            ConfigurationError: If credentials are missing or a value is invalid.
        """
        env = os.environ if environ is None else environ

        email = env.get(ENV_EMAIL, "")
        password = env.get(ENV_PASSWORD, "")
        if not email or not password:
            raise ConfigurationError(f"{ENV_EMAIL} and {ENV_PASSWORD} environment variables are required")

        values: dict[str, object] = {
            "url": env.get(ENV_URL) or DEFAULT_NPM_URL,
            "email": email,
            "password": password,
            "readonly": env.get(ENV_READONLY) == READONLY_TRUE_VALUE,
            "log_level": (env.get(ENV_LOG_LEVEL) or default_log_level).upper(),
            "log_file": env.get(ENV_LOG_FILE) or None,
        }
        timeout = env.get(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from e
