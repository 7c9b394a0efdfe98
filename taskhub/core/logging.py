"""Console logging configuration.

Call ``setup_logging()`` once at command startup; modules log through
``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from taskhub.core.config import settings


class ConsoleFormatter(logging.Formatter):
    """Compact ``HH:MM:SS [L] name: message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[0]:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the root logger with a single stderr handler.

    Args:
        level: Level name override; defaults to ``settings.LOG_LEVEL``.

    Returns:
        The configured root logger.
    """
    level_name = (level or settings.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(ConsoleFormatter())
    root.addHandler(console)

    # SQL echo is controlled by the engine, keep the pool quiet
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    return root
