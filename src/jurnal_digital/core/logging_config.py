"""Logging setup for the API process."""

import logging

from jurnal_digital import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)
    # SQL echo stays off unless explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
