"""
Async composition on top of concurrent.futures.

supply_async starts work on a thread pool; then_apply and then_combine build
dependent futures without blocking the caller. Failures travel down the
chain: a dependent future fails with the first exception it sees.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, TypeVar

from flowcore.errors import AsyncTimeoutError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_default_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_default_executor() -> ThreadPoolExecutor:
    global _default_executor
    with _executor_lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(thread_name_prefix="flowcore")
        return _default_executor


def shutdown_default_executor(wait: bool = True) -> None:
    """Stop the shared executor. A later supply_async creates a new one."""
    global _default_executor
    with _executor_lock:
        executor, _default_executor = _default_executor, None
    if executor is not None:
        executor.shutdown(wait=wait)


def supply_async(
    fn: Callable[..., T],
    *args: Any,
    executor: Executor | None = None,
    **kwargs: Any,
) -> Future[T]:
    """Run fn(*args, **kwargs) on executor (or the shared pool)."""
    return (executor or _get_default_executor()).submit(fn, *args, **kwargs)


def _settle(target: Future[R], fn: Callable[[], R]) -> None:
    """Resolve target with fn() or with the exception it raised."""
    try:
        result = fn()
    except BaseException as exc:  # noqa: BLE001
        target.set_exception(exc)
    else:
        target.set_result(result)


def then_apply(future: Future[T], fn: Callable[[T], U]) -> Future[U]:
    """Future resolving to fn(result of future)."""
    out: Future[U] = Future()
    out.set_running_or_notify_cancel()

    def _done(src: Future[T]) -> None:
        _settle(out, lambda: fn(src.result()))

    future.add_done_callback(_done)
    return out


def then_combine(first: Future[T], second: Future[U], fn: Callable[[T, U], R]) -> Future[R]:
    """Future resolving to fn(first result, second result) once both are done."""
    out: Future[R] = Future()
    out.set_running_or_notify_cancel()
    lock = threading.Lock()
    pending = [2]

    def _done(src: Future[Any]) -> None:
        exc = src.exception() if not src.cancelled() else None
        with lock:
            if out.done():
                return
            if src.cancelled() or exc is not None:
                _settle(out, src.result)
                return
            pending[0] -= 1
            if pending[0]:
                return
        _settle(out, lambda: fn(first.result(), second.result()))

    first.add_done_callback(_done)
    second.add_done_callback(_done)
    return out


def wait_result(future: Future[T], timeout: float | None = None) -> T:
    """Block for the result; AsyncTimeoutError if it takes longer than timeout."""
    try:
        return future.result(timeout=timeout)
    except FuturesTimeoutError as exc:
        raise AsyncTimeoutError(f"Result not available after {timeout} seconds") from exc
