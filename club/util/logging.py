"""Standard-library logging for scripts and third-party libraries.

Client code logs through logfire. This module sets up the plain
``logging`` side: console output for scripts, quieter transport libraries,
and forwarding of ``club.*`` records into logfire so both end up in one trace.
"""

import logging
import sys

import logfire

from club.config import Settings

# socket.io and its HTTP stack log every packet at INFO
_TRANSPORT_LOGGERS = ("httpx", "httpcore", "socketio", "engineio", "aiohttp")


def log_level(settings: Settings) -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for a client process."""
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    club_logger = logging.getLogger("club")
    club_logger.setLevel(level)
    club_logger.addHandler(logfire.LogfireLoggingHandler())

    get_logger(__name__).debug(
        f"Logging configured for {settings.environment} at {logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``; scripts outside the package are nested under ``club``."""
    if name != "club" and not name.startswith("club."):
        name = f"club.{name}"
    return logging.getLogger(name)
