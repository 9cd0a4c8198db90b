"""
Event record for the dispatcher.

Events are immutable data carriers: a routing key and an opaque payload.
The dispatcher and handlers react to them; they hold no business logic.
"""

from dataclasses import dataclass
from typing import Any

from flowcore.errors import InvalidEventTypeError


def validate_event_type(event_type: Any) -> str:
    """Return event_type unchanged if it is a non-empty string."""
    if not isinstance(event_type, str) or not event_type:
        raise InvalidEventTypeError(f"Event type must be a non-empty string, got {event_type!r}")
    return event_type


@dataclass(frozen=True)
class Event:
    """One published occurrence. The payload is never inspected."""

    type: str
    payload: Any = None

    def __post_init__(self) -> None:
        validate_event_type(self.type)
