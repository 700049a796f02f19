"""
Structured logging for the Bookshelf API

Every log line emitted while a request is in flight carries its request id,
and the GraphQL operation name once the body has been decoded.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_name_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextFilter:
    """structlog processor injecting the per-request context variables."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id

        operation_name = operation_name_ctx.get()
        if operation_name:
            event_dict.setdefault("graphql_operation", operation_name)

        return event_dict


def configure_logging(debug: bool = False, log_level: str = "INFO") -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Colored console output at DEBUG level instead of JSON at ``log_level``
        log_level: Level name used outside debug mode
    """
    level = logging.DEBUG if debug else logging.getLevelName(log_level.upper())
    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14-character URL-safe id: microsecond timestamp plus 2 random bytes."""
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


def set_operation_name(operation_name: str | None) -> None:
    operation_name_ctx.set(operation_name)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_name_ctx.set(None)
