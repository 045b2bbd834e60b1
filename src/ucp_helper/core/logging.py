"""
UCP Helper Logging

All ucp_helper modules log through get_logger(), which attaches one shared
stderr handler. Output is plain text by default:

    [UCP WARNING] [commands.scaling] Trainer tier 12 clamped to 7

or one JSON object per line when UCP_LOG_JSON is set. Fields passed via
``extra=`` are kept in the JSON form.

Level comes from UCP_LOG_LEVEL (UCP_DEBUG still switches on DEBUG).
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from .config import get_settings, is_debug_enabled, is_json_logging

PACKAGE_LOGGER = "ucp_helper"

# Attributes every LogRecord carries; anything else came in via extra=
_STANDARD_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _short_name(logger_name: str) -> str:
    """Logger name relative to the package (``scaling.engine``)."""
    prefix = PACKAGE_LOGGER + "."
    if logger_name.startswith(prefix):
        return logger_name[len(prefix):]
    return logger_name


def _format_exception(record: logging.LogRecord) -> str:
    return "".join(traceback.format_exception(*record.exc_info)) if record.exc_info else ""


class UcpFormatter(logging.Formatter):
    """Text or JSON formatter for ucp_helper records."""

    def __init__(self, json_output: bool = False) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        if self.json_output:
            return self._format_json(record)

        line = f"[UCP {record.levelname}] [{_short_name(record.name)}] {record.getMessage()}"
        exception = _format_exception(record)
        return f"{line}\n{exception}" if exception else line

    def _format_json(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="seconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_FIELDS
        )

        exception = _format_exception(record)
        if exception:
            entry["exception"] = exception

        return json.dumps(entry, default=str)


_loggers: dict[str, logging.Logger] = {}
_handler: Optional[logging.Handler] = None


def _shared_handler() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(UcpFormatter(json_output=is_json_logging()))
    return _handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger, typically ``get_logger(__name__)``.

    Loggers are cached; records do not propagate to the root logger.
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.setLevel(get_settings().log_level_int)
        logger.addHandler(_shared_handler())
        logger.propagate = False
        _loggers[name] = logger
    return logger


def debug_enabled() -> bool:
    """True when UCP_LOG_LEVEL (or UCP_DEBUG) asks for DEBUG output."""
    return is_debug_enabled()


def reset_logging() -> None:
    """
    Return every ucp_helper logger to stock logging behavior (for tests).

    Detaches the shared handler, restores propagation and clears levels so
    pytest's caplog sees records. The logger cache is kept.
    """
    global _handler

    registered = [
        logger
        for name, logger in logging.Logger.manager.loggerDict.items()
        if name.startswith(PACKAGE_LOGGER) and isinstance(logger, logging.Logger)
    ]
    for logger in {*registered, *_loggers.values()}:
        if _handler is not None:
            logger.removeHandler(_handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    _handler = None
