"""Logging configuration."""

import logging
import os

_KNOWN_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def setup_logging() -> None:
    """Configure application logging."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in _KNOWN_LEVELS:
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # SQL echo is only useful when explicitly debugging persistence
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
