"""Logging configuration for the translation service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_QUIET_LOGGERS = ("uvicorn.access", "dateparser", "tzlocal")


def configure_logging(level: str = "INFO") -> None:
    """Configure process logging and route uvicorn's loggers through the root handler.

    Logs are internal diagnostics; error details never reach API response bodies.
    """

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)

    for name in ("uvicorn", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
