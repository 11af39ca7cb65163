"""Logging setup for the subway service processes."""

import logging

from subway.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name. If None, reads LOG_LEVEL from settings.
    """
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
