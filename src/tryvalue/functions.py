"""Callable shapes accepted by Outcome operations.

Every shape may raise; the Outcome operation that invokes it decides whether
the exception is captured.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tryvalue._validation import _require_callable

type Computation[T] = Callable[[], T]
type Procedure = Callable[[], Any]
type CheckedFunction[T, R] = Callable[[T], R]
type CheckedPredicate[T] = Callable[[T], bool]
type Consumer[T] = Callable[[T], Any]


def identity[T]() -> CheckedFunction[T, T]:
    """Return a function that returns its argument."""
    return _identity


def _identity[T](value: T) -> T:
    return value


def compose[T, U, R](
    after: CheckedFunction[U, R], before: CheckedFunction[T, U]
) -> CheckedFunction[T, R]:
    """Return ``lambda x: after(before(x))``."""
    _require_callable(after, "after")
    _require_callable(before, "before")
    return lambda value: after(before(value))


def and_then[T, U, R](
    first: CheckedFunction[T, U], then: CheckedFunction[U, R]
) -> CheckedFunction[T, R]:
    """Return ``lambda x: then(first(x))``."""
    return compose(then, first)


__all__ = [
    "CheckedFunction",
    "CheckedPredicate",
    "Computation",
    "Consumer",
    "Procedure",
    "and_then",
    "compose",
    "identity",
]
