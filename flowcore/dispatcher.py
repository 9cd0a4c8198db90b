"""
Dispatcher: synchronous, name-routed event dispatch.

Handlers are keyed by event type and called in registration order. Nested
emits from inside a handler run to completion before the outer emit moves
on to its next handler. No async, no queue: dispatch is a plain call stack.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from flowcore.errors import InvalidHandlerError
from flowcore.events import Event, validate_event_type

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class Dispatcher:
    """
    Registry of handlers keyed by event type.

    Handler lists are append-only. emit() copies the list under the lock and
    calls the copy outside it, so handlers registered mid-dispatch only see
    later emits. A failing handler stops the emit and its error propagates.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()

    def on(self, event_type: str, handler: Handler) -> None:
        """Register handler for event_type. The same handler may be added twice."""
        validate_event_type(event_type)
        if not callable(handler):
            raise InvalidHandlerError(f"Handler for {event_type!r} must be callable, got {handler!r}")
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)
        logger.debug("Registered handler %r for %s", handler, event_type)

    def emit(self, event_type: str, payload: Any = None) -> None:
        """Build an Event and call every handler for its type, in order."""
        event = Event(type=event_type, payload=payload)
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))
        if not handlers:
            logger.debug("No handlers for %s", event_type)
            return
        logger.debug("Dispatching %s to %d handler(s)", event_type, len(handlers))
        for h in handlers:
            h(event)

    def handlers(self, event_type: str) -> tuple[Handler, ...]:
        """Snapshot of the handlers registered for event_type."""
        with self._lock:
            return tuple(self._handlers.get(event_type, ()))

    def event_types(self) -> list[str]:
        """Event types with at least one handler, in first-registration order."""
        with self._lock:
            return list(self._handlers)

    def handler_count(self, event_type: str | None = None) -> int:
        """Number of handlers for event_type, or across all types if None."""
        with self._lock:
            if event_type is not None:
                return len(self._handlers.get(event_type, ()))
            return sum(len(hs) for hs in self._handlers.values())
