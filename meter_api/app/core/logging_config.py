"""
Logging configuration for the Meter API.

Only the ``meter_api`` package logger is configured; the root logger is
left to whoever owns the process.  When the service runs under uvicorn
the package logger writes through uvicorn's own handlers, so service
and server messages share one stream and one format.  Run any other
way (tests, a plain import) it falls back to a console handler.  Log
level and an optional log file come from ``Settings``.
"""

import logging
from pathlib import Path

from .config import Settings


PACKAGE_LOGGER = "meter_api"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _root_configured() -> bool:
    return bool(logging.getLogger().handlers)


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure and return the package logger.

    The level from ``settings.log_level`` is applied on every call
    (unknown names fall back to ``INFO``).  Handlers are attached only
    once, and not at all when the root logger already has some, since
    records propagate there anyway.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if logger.handlers or _root_configured():
        return logger

    uvicorn_handlers = logging.getLogger("uvicorn").handlers
    if uvicorn_handlers:
        for handler in uvicorn_handlers:
            logger.addHandler(handler)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_FORMATTER)
        logger.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)
    return logger
