"""Structured logging for the JWS service facade.

The engine functions never log. Only :class:`compact_jws.service.JWSService`
emits events, and every string field passes through the redaction processor
so PEM blocks and ``secret=...`` fragments never reach the output.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, cast

import structlog

from .constants import PACKAGE_NAME
from .errors import redact_sensitive

DEFAULT_LOG_LEVEL = "INFO"


def redact_event(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    for name, value in event_dict.items():
        if isinstance(value, str):
            event_dict[name] = redact_sensitive(value)
    return event_dict


def build_processors() -> list[Any]:
    """Processor chain for service events; redaction runs just before rendering."""
    return [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_event,
        structlog.processors.JSONRenderer(sort_keys=True),
    ]


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Route service events through structlog as redacted JSON lines.

    Unknown level names fall back to INFO.
    """
    resolved = logging.getLevelName(level.upper())
    log_level = resolved if isinstance(resolved, int) else logging.INFO

    structlog.reset_defaults()
    structlog.configure(
        processors=build_processors(),
        cache_logger_on_first_use=True,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def get_logger(name: str | None = None) -> structlog.types.FilteringBoundLogger:
    return cast(
        structlog.types.FilteringBoundLogger,
        structlog.get_logger(name or PACKAGE_NAME, component=PACKAGE_NAME),
    )
