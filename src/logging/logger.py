# src/logging/logger.py - v2
"""Handler setup for the ``graphderive`` logger namespace.

Modules log through ``logging.getLogger(__name__)``. Applications that want
graphderive output call ``configure_logging()``; the library itself never
installs handlers.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from graphderive.config.settings import Settings, get_settings
from graphderive.logging.context import current_operation

ROOT_LOGGER = "graphderive"


class OperationFilter(logging.Filter):
    """Stamp each record with the running derivation (``-`` outside one)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.operation = current_operation() or "-"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "operation": getattr(record, "operation", "-"),
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


TEXT_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s (%(operation)s) %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Install console (and optional rotating file) handlers from Settings.

    Re-running replaces previously installed handlers.

    Returns:
        The configured ``graphderive`` logger.
    """
    settings = settings or get_settings()
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(settings.log_level)

    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file is not None:
        from graphderive.logging.handlers import create_rotating_handler

        handlers.append(create_rotating_handler(
            settings.log_file,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(OperationFilter())
        root_logger.addHandler(handler)

    return root_logger
