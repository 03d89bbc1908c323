"""Process-wide logging setup shared by the API and the CLI."""

import logging
import sys
from functools import lru_cache

from fintrack_config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "aiosqlite",
    "uvicorn.access",
)


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Log level for fintrack modules taken from settings
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("fintrack").setLevel(log_level)
    logging.getLogger("fintrack_config").setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
