"""
Incident Chat - Structured Logging Configuration
"""

import logging
import sys
from typing import Any, Optional, Protocol, runtime_checkable

import structlog

from incidentchat.core.config import settings


@runtime_checkable
class IncidentLogger(Protocol):
    """Logger capability injected into the notifier."""

    def error(self, context: Any) -> None: ...

    def log(self, context: Any) -> None: ...

    def debug(self, context: Any) -> None: ...


def setup_logging() -> None:
    """Configure structured logging with structlog."""

    log_level = logging.DEBUG if settings.APP_DEBUG else logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # Development: Pretty console output
    if settings.APP_ENV == "development":
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        # Production: JSON output for log aggregation
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


class StructlogIncidentLogger:
    """
    Adapts a structlog logger to the ``IncidentLogger`` capability.

    Dict contexts are split into an event (their ``msg`` key) and key/value
    pairs; exceptions are logged with their traceback.
    """

    DEFAULT_EVENT = "incident_chat"

    def __init__(self, logger: Optional[Any] = None):
        self._logger = logger or get_logger("incidentchat")

    def error(self, context: Any) -> None:
        self._emit(self._logger.error, context)

    def log(self, context: Any) -> None:
        self._emit(self._logger.info, context)

    def debug(self, context: Any) -> None:
        self._emit(self._logger.debug, context)

    def _emit(self, method, context: Any) -> None:
        if isinstance(context, BaseException):
            method(str(context) or type(context).__name__, exc_info=context)
        elif isinstance(context, dict):
            fields = dict(context)
            event = fields.pop("msg", self.DEFAULT_EVENT)
            # "event" is structlog's positional slot
            if "event" in fields:
                fields["event_"] = fields.pop("event")
            method(event, **{str(k): v for k, v in fields.items()})
        else:
            method(str(context))
