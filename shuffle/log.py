"""Application logger setup for Shuffle front ends."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from . import config


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure and return the ``shuffle`` logger.

    The handler setup is idempotent so that repeated imports (e.g. in tests)
    do not stack duplicate handlers. Output goes to a rotating file inside
    *log_dir* (the current working directory when omitted) and is mirrored to
    stdout.
    """

    logger = logging.getLogger(config.LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(config.LOG_FORMAT)

    log_path = Path(log_dir or Path.cwd()) / config.LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    logger.propagate = False

    return logger
