import logging
import json
from typing import Optional

from .config import get_settings

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
}

LOGGER_NAME = "sorted_linked_list"

logger = logging.getLogger(LOGGER_NAME)


class JSONFormatter(logging.Formatter):
    """Simple JSON log formatter including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=repr)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a JSON stream handler to the package logger.

    Safe to call repeatedly: only one handler is ever installed. The level
    defaults to ``SORTED_LIST_LOG_LEVEL``.
    """
    if level is None:
        level = get_settings().log_level
    if not any(getattr(h, "_sorted_list_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        handler._sorted_list_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


__all__ = ["JSONFormatter", "configure_logging", "logger", "LOGGER_NAME"]
