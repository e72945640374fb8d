"""Structured logging for the computation service, built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor


def _service_fields(service: Optional[str], env: Optional[str]) -> Processor:
    """Stamp every event with the service identity.

    Request-scoped contextvars are cleared per request, so these fields live
    in the processor chain instead.
    """

    def add_service(_, __, event_dict: EventDict) -> EventDict:
        if service:
            event_dict.setdefault("service", service)
        if env:
            event_dict.setdefault("env", env)
        return event_dict

    return add_service


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service: Optional[str] = None,
    env: Optional[str] = None,
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        _service_fields(service, env),
    ]

    if json_logs:
        # exc_info from the 500 handler becomes a structured traceback
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    # PrintLogger drops positional names, so the module name is bound lazily
    return structlog.get_logger().bind(logger=name)
