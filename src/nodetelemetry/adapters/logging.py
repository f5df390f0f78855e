"""Logging setup for the nodetelemetry logger hierarchy.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves; applications call configure_logging() once.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "nodetelemetry"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` fields as key=value pairs.

    Example:
        ``logger.warning("fetch failed", extra={"rpc_method": "txpool_content"})``
        renders as ``... fetch failed rpc_method=txpool_content``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _STANDARD_LOGRECORD_ATTRS
            and isinstance(value, (str, int, float, bool))
        ]
        if not extras:
            return message
        # keep a trailing traceback below the key=value pairs
        head, sep, tail = message.partition("\n")
        return f"{head} {' '.join(extras)}{sep}{tail}"


class _PackageStreamHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def configure_logging(
    level: str | int = "INFO", stream: TextIO | None = None
) -> logging.Logger:
    """Attach a stream handler to the nodetelemetry logger.

    Calling this again only updates the level; it never adds a second handler.

    Args:
        level: Logging level name or number.
        stream: Output stream (default: sys.stderr).

    Returns:
        The configured nodetelemetry logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(h, _PackageStreamHandler) for h in logger.handlers):
        handler = _PackageStreamHandler(stream or sys.stderr)
        handler.setFormatter(ExtraFieldsFormatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
    return logger
