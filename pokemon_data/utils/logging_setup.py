"""Logging setup for applications that use the library.

The library itself only logs through module loggers and never calls this on
import.

Usage:
    from pokemon_data.utils.logging_setup import setup_logging
    setup_logging()
"""
from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
import sys

from .settings import Settings, load_settings

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
LOG_FILE_NAME = 'pokemon_data.log'


def setup_logging(settings: Settings | None = None, logger: logging.Logger | None = None) -> bool:
    """Configures `logger` (the root logger by default) once.

    Returns False without touching anything if it already has handlers.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        # Already configured
        return False
    settings = settings or load_settings()
    logger.setLevel(settings.log_level)

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler(stream=sys.stdout)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if settings.log_to_file:
        path = Path(settings.log_dir)
        path.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(path / LOG_FILE_NAME, maxBytes=2_000_000, backupCount=3, encoding='utf-8')
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return True
