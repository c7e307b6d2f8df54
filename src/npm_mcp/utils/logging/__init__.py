"""Logging utilities for npm-mcp.

- logger_setup: namespaced loggers, stderr console handler, optional JSONL file
- iso_formatter: JSONL formatter with ISO 8601 timestamps
"""

from npm_mcp.utils.logging.iso_formatter import ISO8601Formatter
from npm_mcp.utils.logging.logger_setup import ConsoleFormatter, configure_logging, get_logger

__all__ = [
    "ConsoleFormatter",
    "ISO8601Formatter",
    "configure_logging",
    "get_logger",
]
