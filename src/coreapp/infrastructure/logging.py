"""Logging setup built on loguru.

Modules call `get_logger(__name__)` and receive the shared loguru logger
bound to their module name. The sink is configured lazily with defaults on
first use, or explicitly through `setup_logging` / `configure_logger`.

Note: importing coreapp triggers that first use, and configuring replaces
every loguru sink, so host applications should add their own sinks after
the import (or after `setup_logging`).
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings
from ..domain.environment import Environment

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)
_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[module]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment | None = None,
) -> None:
    """Replace loguru's sinks with a single stderr sink.

    Development gets a colourised format; every other environment (or an
    unknown one) gets a plain format suitable for log collection.
    """
    global _configured

    is_development = environment == Environment.DEVELOPMENT
    logger.remove()
    logger.configure(extra={"module": "coreapp"})
    logger.add(
        sys.stderr,
        level=str(level),
        format=_DEVELOPMENT_FORMAT if is_development else _DEFAULT_FORMAT,
        colorize=is_development,
        backtrace=is_development,
        diagnose=is_development,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from Settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return the shared logger bound to a module name.

    Configures logging with defaults if nothing has configured it yet.
    """
    if not _configured:
        configure_logger()
    return logger.bind(module=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget the configuration (used by tests)."""
    global _configured

    logger.remove()
    _configured = False
