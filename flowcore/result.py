"""
Result: success-or-failure value for pipelines that should not raise.

A failed step becomes data (an error message) so the rest of a batch keeps
flowing; callers filter the successes afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from flowcore.errors import ResultError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one step. Immutable."""

    value: T | None = None
    error: str | None = None
    success: bool = True

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(value=value, error=None, success=True)

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        return cls(value=None, error=error, success=False)

    @property
    def is_success(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Return the value, or raise ResultError for a failure."""
        if not self.success:
            raise ResultError(self.error or "Result is a failure")
        return self.value  # type: ignore[return-value]


def attempt(
    fn: Callable[..., T],
    *args: Any,
    errors: tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Result[T]:
    """
    Call fn and capture the outcome.

    Exceptions listed in errors become Result.fail(str(exc)); anything else
    propagates.
    """
    try:
        return Result.ok(fn(*args, **kwargs))
    except errors as exc:
        return Result.fail(str(exc))


def safe_parse_int(text: str) -> Result[int]:
    """Parse a base-10 integer without raising."""
    try:
        return Result.ok(int(text))
    except (TypeError, ValueError):
        return Result.fail(f"Invalid number: {text}")


def successes(results: Iterable[Result[T]]) -> list[T]:
    """Values of the successful results, in order."""
    return [r.value for r in results if r.success]  # type: ignore[misc]
