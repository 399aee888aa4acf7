from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

LOGGER_NAME = "text_summary"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "stage": getattr(record, "stage", ""),
            "message": record.getMessage(),
        }
        extra = getattr(record, "extra_fields", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(*, force: bool = False, stream=None) -> logging.Logger:
    """Attach a JSON stream handler to the package logger.

    The level comes from SUMMARY_LOG_LEVEL (default WARNING). Calling again
    is a no-op unless `force` replaces the existing handlers.
    """
    log_level = os.getenv("SUMMARY_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level, logging.WARNING))
    logger.propagate = False

    if force:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger


def log_event(logger: logging.Logger | logging.LoggerAdapter, level: str, stage: str, message: str, **fields: Any) -> None:
    fn = getattr(logger, level.lower(), logger.info)
    fn(message, extra={"stage": stage, "extra_fields": fields})
