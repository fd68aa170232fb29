"""Logging configuration for the reader.

The terminal is in fullscreen mode while reading, so log records go to a
rotating file in the platform's user log directory instead of stderr.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import ReaderConstants

logger = logging.getLogger(__name__)


def log_file_path() -> Path:
    return Path(platformdirs.user_log_dir("fixread")) / ReaderConstants.LOG_FILE_NAME


def configure_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> Optional[Path]:
    """Send fixread's log records to a rotating file.

    Args:
        level: Level name such as "DEBUG"; defaults to FIXREAD_LOG_LEVEL or WARNING.
        log_file: Override for the log file location.

    Returns:
        The log file in use, or None if logging had to be disabled.
    """
    level = (level or ReaderConstants.LOG_LEVEL).upper()
    path = log_file or log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logging.getLogger("fixread").addHandler(logging.NullHandler())
        logger.warning("Could not create log directory %s: %s", path.parent, e)
        return None

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "filename": str(path),
                    "maxBytes": ReaderConstants.LOG_MAX_BYTES,
                    "backupCount": ReaderConstants.LOG_BACKUP_COUNT,
                    "encoding": "utf-8",
                    "formatter": "plain",
                },
            },
            "loggers": {
                "fixread": {"level": level, "handlers": ["file"], "propagate": False},
            },
        }
    )
    return path
