"""
Structured logging for the Agenda API.

Per-request fields (request id, GraphQL operation, caller, organization and
agenda folder) live in structlog's context variables and are merged into
every event logged while the request is in flight.
"""

import logging
import sys
from typing import Any
from uuid import UUID, uuid4

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)


def stringify_identifiers(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render UUID values as strings so both renderers print them the same way."""
    _ = logger, method_name
    for key, value in event_dict.items():
        if isinstance(value, UUID):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Console output in debug mode, one JSON object per line otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            stringify_identifiers,
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


def bind_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Start a fresh log context for an incoming request and return its id."""
    clear_contextvars()
    request_id = request_id or uuid4().hex[:16]
    bind_contextvars(request_id=request_id)
    if graphql_operation:
        bind_contextvars(graphql_operation=graphql_operation)
    return request_id


def bind_user_id(user_id: UUID | str) -> None:
    bind_contextvars(user_id=str(user_id))


def bind_agenda_context(
    *,
    organization_id: UUID | None = None,
    agenda_folder_id: UUID | None = None,
    event_id: UUID | None = None,
) -> None:
    """Attach the agenda resources a request is acting on."""
    values = {
        "organization_id": organization_id,
        "agenda_folder_id": agenda_folder_id,
        "event_id": event_id,
    }
    bind_contextvars(**{k: str(v) for k, v in values.items() if v is not None})


def clear_request_context() -> None:
    clear_contextvars()


def current_log_context() -> dict[str, Any]:
    return get_contextvars()
