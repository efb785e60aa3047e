"""Logging setup for QuickLaunch.

Diagnostics go to stderr (or a file) so stdout carries only the one-line
result. Records can be rendered as plain text or as JSON lines; fields
passed through ``extra=`` (the HTTP layer adds ``purpose``, ``final_url``,
``redirects``...) end up under ``context`` in the JSON form.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(levelname)s: %(message)s"

# Libraries whose INFO/DEBUG chatter would drown out ours
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")

# Attributes every LogRecord has; anything else arrived via ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Shape::

        {"level": "WARNING", "message": "...", "timestamp": "...+00:00",
         "context": {"logger_name": "...", "module": "...", "function": "...",
                     "line": 42, ...extra fields...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc) if exc else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        return json.dumps(
            {
                "level": record.levelname,
                "message": record.getMessage(),
                "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
                "context": context,
            },
            default=str,
        )


def _build_handler(
    filename: str | None, structured: bool, format_string: str | None
) -> logging.Handler:
    handler: logging.Handler = (
        logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stderr)
    )
    handler.setFormatter(
        StructuredJSONFormatter()
        if structured
        else logging.Formatter(format_string or DEFAULT_FORMAT)
    )
    return handler


def configure_logging(
    level: str = "WARNING",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure the root logger; safe to call again to reconfigure.

    Args:
        level: Level name, case-insensitive
        format_string: ``logging.Formatter`` format (ignored when structured)
        filename: Log file; stderr when None
        structured: Emit JSON lines instead of text

    Examples:
        >>> configure_logging(level="INFO")
        >>> configure_logging(level="DEBUG", structured=True, filename="quicklaunch.jsonl")
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[_build_handler(filename, structured, format_string)],
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def get_logger(name: str, **kwargs: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return ``logging.getLogger(name)``, wrapped in a LoggerAdapter if context is given.

    Example:
        >>> log = get_logger(__name__, hostname="mail.google.com")
        >>> log.info("Fetching icons")  # record carries hostname=...
    """
    logger = logging.getLogger(name)
    if kwargs:
        return logging.LoggerAdapter(logger, kwargs)
    return logger
