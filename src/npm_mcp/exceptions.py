"""Custom exceptions for npm-mcp.

Every error the client or the dispatchers raise on purpose derives from
NpmError and carries an ErrorKind tag, so callers can branch on the kind
without matching exception classes:

    - ConfigurationError (CONFIG): missing credentials, bad env values
    - AuthenticationError (AUTH): token endpoint answered non-2xx
    - ReadonlyModeError (READONLY): mutating call while readonly
    - RemoteAPIError (REMOTE_API): resource endpoint non-2xx or transport failure
    - InvalidInputError (INPUT): malformed user input (e.g. non-numeric id)

None of these are retried. The MCP server renders them as error tool
results; the CLI prints them and exits with NpmError.exit_code.

Usage:
    from npm_mcp.exceptions import NpmError, ReadonlyModeError
"""

from __future__ import annotations

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "ErrorKind",
    "InvalidInputError",
    "NpmError",
    "ReadonlyModeError",
    "RemoteAPIError",
]

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an NpmError."""

    CONFIG = "config_error"
    AUTH = "auth_error"
    READONLY = "readonly_violation"
    REMOTE_API = "remote_api_error"
    INPUT = "input_error"


class NpmError(Exception):
    """Base exception for all npm-mcp errors.

    Attributes:
        kind: ErrorKind tag for this error.
        exit_code: Process exit code used by the CLI and server entry points.
        message: Human-readable message.
    """

    kind: ErrorKind
    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(NpmError):
    """Configuration is invalid or incomplete.

    Raised when:
    - NPM_EMAIL or NPM_PASSWORD is missing or empty
    - An optional setting (timeout, log level) has an invalid value
    - The configured log file cannot be created or opened
    """

    kind = ErrorKind.CONFIG


class AuthenticationError(NpmError):
    """The token endpoint rejected the credentials.

    Attributes:
        status_code: HTTP status from the token endpoint (None on transport failure).
        body: Response body text.
    """

    kind = ErrorKind.AUTH

    def __init__(self, body: str, status_code: int | None = None) -> None:
        if status_code is not None:
            message = f"Authentication failed ({status_code}): {body}"
        else:
            message = f"Authentication failed: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ReadonlyModeError(NpmError):
    """A mutating operation was attempted while the client is readonly.

    Raised before any network request is made.

    Attributes:
        operation: Name of the blocked operation (e.g. "deleteStream").
    """

    kind = ErrorKind.READONLY

    def __init__(self, operation: str) -> None:
        super().__init__(f'Operation "{operation}" is not allowed in readonly mode')
        self.operation = operation


class RemoteAPIError(NpmError):
    """A resource endpoint answered non-2xx, or the request never completed.

    Attributes:
        status_code: HTTP status (None for transport failures).
        body: Response body text, or the transport error description.
    """

    kind = ErrorKind.REMOTE_API

    def __init__(self, body: str, status_code: int | None = None) -> None:
        if status_code is not None:
            message = f"API request failed: {status_code} - {body}"
        else:
            message = f"API request failed: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidInputError(NpmError):
    """User input could not be turned into a valid request."""

    kind = ErrorKind.INPUT
