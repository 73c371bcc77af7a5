"""
Logging setup for DeliveryPilot.

Library modules only create child loggers of ``deliverypilot``; the service
(or any host application) calls ``configure_logging()`` once at startup.
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

LOGGER_NAME = "deliverypilot"

# Extra attributes copied onto the JSON entry when a call site passes them
_EXTRA_FIELDS = (
    "request_id",
    "shop",
    "rule_id",
    "country",
    "timezone",
    "attempts",
    "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the ``deliverypilot`` logger.

    Args:
        level: Log level name; defaults to ``DP_LOG_LEVEL`` or INFO

    Returns:
        The configured package logger
    """
    level_name = (level or os.getenv("DP_LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Idempotent: repeated startup calls must not duplicate output
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(area: str) -> logging.Logger:
    """Get a child logger, e.g. ``get_logger("engine")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{area}")
