"""Logger setup for npm-mcp.

All loggers live under the "npm-mcp" namespace and log dict messages with
at least an "event" and a "message" key:

    get_logger("client").info({"event": "token_acquired", "message": "..."})

Logging destinations:
- stderr (console): human-readable "LEVEL: message" lines. stdout is never
  used because the MCP stdio transport and the CLI's JSON output own it.
- File (optional): JSONL with ISO 8601 timestamps, when a log file is configured.
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "configure_logging",
    "get_logger",
]

import logging
import sys
from pathlib import Path

from npm_mcp.constants import APP_NAME
from npm_mcp.exceptions import ConfigurationError
from npm_mcp.utils.logging.iso_formatter import ISO8601Formatter


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts the 'message' or 'event' field from dict messages.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for stderr.

        Args:
            record: The log record to format.

        Returns:
            str: Formatted log message with level prefix.
        """
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
        else:
            msg = record.getMessage()
        return f"{record.levelname}: {msg}"


def get_logger(component: str | None = None) -> logging.Logger:
    """Get a logger in the npm-mcp namespace.

    Args:
        component: Optional child name (e.g. "client" -> "npm-mcp.client").

    Returns:
        logging.Logger: Logger instance.
    """
    if component:
        return logging.getLogger(f"{APP_NAME}.{component}")
    return logging.getLogger(APP_NAME)


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Attach console (and optionally file) handlers to the npm-mcp logger.

    Safe to call more than once: existing handlers are closed and replaced.

    Args:
        level: Logging level name for both handlers.
        log_file: Optional JSONL log file path. Parent directories are created.

    Returns:
        logging.Logger: The configured top-level npm-mcp logger.

    Raises:
        ConfigurationError: If the log file cannot be created or opened.
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {log_path}: {e}") from e
        file_handler.setLevel(level)
        file_handler.setFormatter(ISO8601Formatter())
        logger.addHandler(file_handler)

    return logger
