"""Structured logging configuration.

Loggers write to stdout as one JSON object per line (or plain text when
``ROBTOOL_LOG_FORMAT=text``).  Engine modules attach context such as
the study id through ``extra=``; the formatter copies those fields into
the JSON payload.
"""

import json
import logging
import sys
from typing import Any, Dict

from ..config.settings import settings

# Attributes lifted from ``extra=`` into the JSON record
CONTEXT_FIELDS = ("study_id", "study_type", "domain", "index", "value")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if settings.log_format == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger


def set_level(level: str) -> None:
    """Change the level of every robtool logger created so far."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("robtool") and isinstance(logger, logging.Logger):
            logger.setLevel(resolved)
