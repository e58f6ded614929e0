# src/dotcheck/core/logging.py
"""Structured logging for dotcheck.

Module loggers come from ``get_logger``. Each one wraps the stdlib logger
of the same name with its own structlog processor chain, so dotcheck never
calls ``structlog.configure`` and leaves the host application's structlog
setup alone.

Records travel through the stdlib ``dotcheck`` logger. Until
``configure_logging`` is called they follow whatever the application set up
(nothing below WARNING is shown by default, and dotcheck only logs at DEBUG
and INFO). ``configure_logging`` attaches a stderr handler to the
``dotcheck`` logger only. Stdout stays reserved for the reporter's summary
and per-trial lines.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

if TYPE_CHECKING:
    from dotcheck.core.config import CheckSettings

ROOT_LOGGER_NAME = "dotcheck"

_CONTEXT_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

_LOGGER_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    *_CONTEXT_PROCESSORS,
    structlog.processors.StackInfoRenderer(),
    ProcessorFormatter.wrap_for_formatter,
]


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop the bookkeeping keys ProcessorFormatter adds to every record."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bound logger for a dotcheck module (typically ``__name__``).

    Filtering uses the stdlib level of ``name``, so the ``dotcheck`` logger's
    level applies to every module below it.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_LOGGER_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "WARNING",
    stream: TextIO | None = None,
) -> None:
    """Show dotcheck's own log records on ``stream`` (stderr by default).

    Replaces any handler a previous call installed and stops propagation,
    so records are not duplicated by the application's root handlers.

    Args:
        json_output: One JSON object per line instead of key=value text.
        level: Minimum level (DEBUG, INFO, WARNING, ERROR).
        stream: Destination; must not be the reporter's stream.
    """
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            processors=[_remove_internal_fields, structlog.processors.format_exc_info, renderer],
            foreign_pre_chain=_CONTEXT_PROCESSORS,
        )
    )

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers = [handler]
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False


def configure_from_settings(settings: "CheckSettings") -> None:
    """Apply ``settings.log_level`` and ``settings.json_logs``."""
    configure_logging(json_output=settings.json_logs, level=settings.log_level)


def reset_logging() -> None:
    """Remove dotcheck's handler and hand records back to the application."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
