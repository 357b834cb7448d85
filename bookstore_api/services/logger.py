"""
Logger Service

A small logging handle with four severities (debug, info, warn, error).

The handle is created once per process and passed explicitly to the
components that log: repositories receive it in their constructor and
routers receive it through a FastAPI dependency. Each call writes
synchronously to the standard logging machinery; there is no buffering.

Usage:
    from bookstore_api.services.logger import get_logger_service

    log = get_logger_service()
    log.info("GetAuthors called")
"""

import logging
from functools import lru_cache

from bookstore_api.config import Settings, get_settings

LOGGER_NAME = "bookstore_api"


class LoggerService:
    """Thin wrapper over a stdlib logger exposing the service's severities."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False) -> None:
        self._logger.error(message, exc_info=exc_info)


def configure_logging(settings: Settings) -> None:
    """
    Configure process-wide logging from application settings.

    Console output always; a log file as well when LOG_FILE is set.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=handlers,
    )


@lru_cache
def get_logger_service() -> LoggerService:
    """Return the process-wide logger handle."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, get_settings().log_level))
    return LoggerService(logger)
