"""
Central logging setup for termcanvas.
Supports console and optional rotating file logs.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    rotate_bytes: int = 5 * 1024 * 1024,
    rotate_keep: int = 3,
) -> None:
    level_value = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level_value, format=LOG_FORMAT)

    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=rotate_bytes,
            backupCount=rotate_keep,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)
