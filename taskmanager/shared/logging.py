"""stdout logging for the taskmanager process."""

import logging
import sys

from taskmanager.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Chatty third-party loggers held at WARNING unless debug is on.
_QUIET_LOGGERS = ("aiosqlite", "asyncio")


def setup_logging() -> None:
    """Root handler on stdout at settings.log_level (DEBUG when settings.debug)."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])
    if not settings.debug:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
