# src/logging/context.py — v2
"""Contextual logging support — attach service, request_id, component to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per service and per request.
_service: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "service", default=None
)
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_component: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "component", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    service: str | None = None
    request_id: str | None = None
    component: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        service=_service.get(),
        request_id=_request_id.get(),
        component=_component.get(),
    )


def set_service_context(service: str) -> None:
    """Set the service name stamped on every record (usually once at startup)."""
    _service.set(service or None)


def set_request_context(request_id: str, component: str | None = None) -> None:
    """Set per-request context."""
    _request_id.set(request_id)
    _component.set(component)


def clear_context() -> None:
    """Reset all context variables."""
    _service.set(None)
    _request_id.set(None)
    _component.set(None)
