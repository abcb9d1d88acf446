"""Logging setup for the FARS command line: plain text or JSON lines."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in via `extra=`.
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed with ``extra=`` (``year``, ``data_file``, ``state``,
    ``error``) are merged into the payload, so a failed year in a batch
    load shows up as ``{"msg": "invalid year: 9999", "year": "9999", ...}``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single stderr handler to the ``fars`` package logger.

    Calling this again replaces the previous handler instead of stacking
    duplicates.  Records stop at the ``fars`` logger and are not passed on
    to root handlers, so each one is printed once.

    Args:
        level: Minimum level for the ``fars`` logger.
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Output stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))

    pkg_logger = logging.getLogger("fars")
    for old in list(pkg_logger.handlers):
        if getattr(old, "_fars_cli", False):
            pkg_logger.removeHandler(old)
    handler._fars_cli = True  # type: ignore[attr-defined]
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
    return handler
