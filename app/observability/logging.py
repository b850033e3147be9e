from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from app.config import Settings


_CONFIGURED = False

# Server loggers that would otherwise print with their own format.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _shared_processors() -> list[Any]:
    # Applied to structlog events and to plain stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _stdout_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(json_logs),
            foreign_pre_chain=_shared_processors(),
        )
    )
    return handler


def configure_logging(level: int = logging.INFO, json_logs: bool = True) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Request records come out as JSON lines by default, or as plain console
    lines when ``json_logs`` is false. Only the first call has an effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    structlog.configure(
        processors=[*_shared_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = _stdout_handler(json_logs)
    for name in (None, *_SERVER_LOGGERS):
        target = logging.getLogger(name)
        target.handlers = [handler]
        target.setLevel(level)
        if name is not None:
            target.propagate = False

    _CONFIGURED = True


def configure_logging_from_settings(settings: Settings) -> None:
    """Apply LOG_LEVEL and LOG_JSON."""

    configure_logging(level=settings.log_level_value, json_logs=settings.log_json)


def reset_logging() -> None:
    """Forget a previous configure_logging() call (used by tests)."""

    global _CONFIGURED
    structlog.reset_defaults()
    _CONFIGURED = False
