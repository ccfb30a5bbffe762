"""Exception hierarchy for tryvalue."""

from __future__ import annotations

from typing import Any


class OutcomeError(Exception):
    """Base exception for all recoverable tryvalue errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(OutcomeError):
    """Settings validation or resolution failed."""


class EmptyValueError(OutcomeError, LookupError):
    """The requested side of an Outcome is not present.

    Raised by ``get()`` on a Failure and ``get_cause()`` on a Success. This
    signals a programming error at the call site, distinct from the wrapped
    application failure.
    """


class PredicateError(EmptyValueError):
    """Cause recorded by ``filter`` when the predicate rejects the value."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Predicate does not hold for {value!r}")
        self.value = value

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.value,), self.__dict__)


class FatalError(BaseException):
    """A fatal exception reached Failure construction.

    Derives from ``BaseException`` so that ``except Exception`` handlers, and
    every capture point in this library, let it through. The escalated
    exception is kept as ``original`` and chained as ``__cause__``.
    """

    def __init__(self, original: BaseException) -> None:
        super().__init__("Fatal error.")
        self.original = original
        self.__cause__ = original

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.original,))


__all__ = [
    "ConfigurationError",
    "EmptyValueError",
    "FatalError",
    "OutcomeError",
    "PredicateError",
]
