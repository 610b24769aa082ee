"""
Logging configuration for the movie catalog.

Console output is always on; a size-rotated log file is added when a file
name is configured. Settings come from `movie_catalog.api.config`.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers kept at WARNING whatever the catalog level is
QUIET_LOGGERS = ('uvicorn.access',)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> Optional[Path]:
    """
    Configure the root logger for the catalog process.

    Args:
        level: Logging level name ('DEBUG', 'INFO', ...), any case
        log_file: File name inside `log_dir`; console only when None
        log_dir: Directory for the log file, created if missing
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep

    Returns:
        Path of the log file, or None when logging to console only
    """
    numeric_level = logging.getLevelName(level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_path = None
    if log_file:
        log_path = Path(log_dir) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_path:
        root_logger.info(f"Logging to file: {log_path}")
    return log_path


def get_logger(name: str) -> logging.Logger:
    """Module logger; levels and handlers come from setup_logging."""
    return logging.getLogger(name)
