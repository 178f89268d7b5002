"""Logging setup. Modules only ever call logging.getLogger(__name__); the entrypoint calls configure_logging() once."""

import logging
from typing import Optional

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a stream handler to the root logger (if it has none yet) and set the level. Falls back to the configured log level.
    ----
    Meant to be called once by the application entrypoint at startup (next to init_db()), never by library modules.
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level_name)
