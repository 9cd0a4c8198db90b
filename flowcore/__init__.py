"""
flowcore: synchronous, name-routed event dispatch and small reactive helpers.

Single-threaded dispatch, explicit ordering, no hidden queues.
"""

__version__ = "0.1.0"

from flowcore.errors import (
    AsyncTimeoutError,
    DispatchError,
    InvalidEventTypeError,
    InvalidHandlerError,
    ResultError,
)
from flowcore.events import Event
from flowcore.dispatcher import Dispatcher, Handler
from flowcore.result import Result, attempt, safe_parse_int, successes
from flowcore.batching import BatchPublisher, batched

__all__ = [
    "AsyncTimeoutError",
    "BatchPublisher",
    "DispatchError",
    "Dispatcher",
    "Event",
    "Handler",
    "InvalidEventTypeError",
    "InvalidHandlerError",
    "Result",
    "ResultError",
    "attempt",
    "batched",
    "safe_parse_int",
    "successes",
]
