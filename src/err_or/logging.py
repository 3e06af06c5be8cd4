"""
err-or logging - structured logging via structlog.

The conversion functions never log. Logging is reserved for diagnostics around
the containers, such as an ``unwrap()`` on the wrong variant.

Architecture:
    ::

        configure_logging(level="DEBUG", json_format=True)
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level / add_logger_name
          4. add_service_metadata
          5. JSONRenderer (or ConsoleRenderer for dev)

Examples:
    >>> from err_or.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("unwrap_failed", variant="Nothing")

Tags:
    logging, structlog, observability, err-or
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from err_or.errors import ConfigError

if TYPE_CHECKING:
    from err_or.settings import ErrOrSettings

# Package loggers stay at the stdlib's WARNING default until configured
_PACKAGE_LOGGER = "err_or"

_SERVICE_NAME = "err-or"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _resolve_level(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ConfigError(
            f"Unknown log level: {level!r}",
        ).with_context(operation="configure_logging", level=level) from None


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    service: str | None = None,
    *,
    settings: ErrOrSettings | None = None,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON, False for console, None for settings/auto
        service: Service name to include in logs
        settings: Settings to fall back on; defaults to ``get_settings()``

    Raises:
        ConfigError: If the level is not a known logging level.
    """
    global _SERVICE_NAME

    if settings is None:
        from err_or.settings import get_settings

        settings = get_settings()

    level = level or settings.log_level
    numeric_level = _resolve_level(level)
    _SERVICE_NAME = service or settings.service_name

    if json_format is None:
        json_format = settings.log_json
    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        _add_service_metadata,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )
    logging.getLogger(_PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``).

    Events are handed to the stdlib logger of the same name, so until
    ``configure_logging`` runs they are subject to the stdlib WARNING default
    and debug diagnostics stay silent.
    """
    return structlog.wrap_logger(logging.getLogger(name))


__all__ = ["configure_logging", "get_logger"]
