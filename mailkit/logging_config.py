"""
Logging setup for applications embedding mailkit.

The library itself only creates module loggers; it never configures
handlers on import. Call configure_logging() once from the entry point.
"""

import logging
import os

from mailkit.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    The level comes from the argument, then the LOG_LEVEL environment
    variable, then MAIL_LOG_LEVEL via settings.
    """
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL") or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
