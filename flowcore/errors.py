"""
Exception hierarchy for flowcore.

Everything raised by the library itself derives from DispatchError. Errors
raised inside handlers are not wrapped; they reach the caller of emit as-is.
"""


class DispatchError(Exception):
    """Base exception for all flowcore operations."""


class InvalidEventTypeError(DispatchError, ValueError):
    """Raised when an event type is empty or not a string."""


class InvalidHandlerError(DispatchError, TypeError):
    """Raised when a handler passed to on() is not callable."""


class ResultError(DispatchError):
    """Raised when unwrapping a failed Result."""


class AsyncTimeoutError(DispatchError):
    """Raised when waiting on a future exceeds the given timeout.

    Distinct from the built-in TimeoutError so callers can tell a slow
    supplier apart from OS-level timeouts.
    """
