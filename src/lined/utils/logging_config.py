"""
Logging setup.

Standard output belongs to the REPL and the terminal belongs to curses in
visual mode, so log records only go to a file when one is configured.
"""

import logging
import logging.handlers
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_ENV = "LINED_LOG_FILE"
LOG_LEVEL_ENV = "LINED_LOG_LEVEL"

logger = logging.getLogger("lined")


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the ``lined`` logger.

    Args:
        level: Level name such as ``"DEBUG"``; falls back to ``LINED_LOG_LEVEL``
            and then ``WARNING``
        log_file: Path of a rotating log file; falls back to ``LINED_LOG_FILE``.
            Without one, records are discarded.
    """

    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    log_file = log_file or os.environ.get(LOG_FILE_ENV)

    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1 * 1024 * 1024, backupCount=3, encoding='utf-8'
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False

    logger.debug("Logging configured at %s", logging.getLevelName(log_level))
