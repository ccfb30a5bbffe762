"""Outcome: a value that is either a Success or the Failure that prevented it.

Outcomes make failures a predictable part of the data flow instead of
requiring a ``try``/``except`` at every call site. They are evaluated eagerly:
``Outcome.of(fn)`` calls ``fn`` immediately and records how it ended.

Example:
    ratio = (
        Outcome.of(lambda: load_count(path))
        .filter(lambda n: n > 0)
        .map(lambda n: total / n)
        .or_else(0.0)
    )

The type is sealed: ``Success`` and ``Failure`` are its only variants and
neither can be subclassed. Both support structural pattern matching::

    match outcome:
        case Success(value): ...
        case Failure(cause): ...
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, NoReturn

from tryvalue._validation import _require, _require_callable, _require_exception
from tryvalue.config import get_settings
from tryvalue.errors import EmptyValueError, FatalError, PredicateError
from tryvalue.fatal import escalate, is_fatal

if TYPE_CHECKING:
    from tryvalue.functions import (
        CheckedFunction,
        CheckedPredicate,
        Computation,
        Consumer,
        Procedure,
    )

log = logging.getLogger(__name__)

_MODULE = __name__
_VARIANTS = frozenset({"Success", "Failure"})


def _attempt[R](body: Computation[Outcome[R]]) -> Outcome[R]:
    """Run ``body`` and turn any exception it raises into a Failure.

    This is the only place where caller logic is guarded. Fatal exceptions
    are escalated by Failure construction and propagate; an already
    escalated ``FatalError`` is re-raised untouched. Settings are resolved
    before ``body`` runs.
    """
    settings = get_settings()
    try:
        return body()
    except FatalError:
        raise
    except BaseException as exc:
        failure: Failure[R] = Failure(exc)
        if settings.log_captures:
            log.debug("Captured %s: %s", type(exc).__name__, exc)
        return failure


def _expect_outcome[R](result: Any, operation: str) -> Outcome[R]:
    if not isinstance(result, Outcome):
        raise TypeError(
            f"{operation}: function must return an Outcome, got {type(result).__name__}"
        )
    return result


class Outcome[T]:
    """Either ``Success(value)`` or ``Failure(cause)``.

    Outcomes are immutable. Combinators return derived outcomes; on the
    side they do not act on, they return the same instance.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != _MODULE or cls.__qualname__ not in _VARIANTS:
            raise TypeError(
                f"Outcome is sealed; {cls.__qualname__} cannot extend it"
            )
        super().__init_subclass__(**kwargs)

    # --- Construction ---

    @staticmethod
    def of[R](computation: Computation[R]) -> Outcome[R]:
        """Call ``computation`` now and capture its result or exception."""
        _require_callable(computation, "computation")
        return _attempt(lambda: Success(computation()))

    @staticmethod
    def run(procedure: Procedure) -> Outcome[None]:
        """Call ``procedure`` now; a normal return yields ``Success(None)``."""
        _require_callable(procedure, "procedure")

        def body() -> Outcome[None]:
            procedure()
            return Success(None)

        return _attempt(body)

    @staticmethod
    def success[R](value: R) -> Outcome[R]:
        """Lift an already computed value; nothing is invoked."""
        return Success(value)

    @staticmethod
    def failure[R](cause: BaseException) -> Outcome[R]:
        """Lift a known exception; fatal causes raise ``FatalError`` instead."""
        return Failure(cause)

    # --- Queries ---

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    # --- Transformation ---

    def map[U](self, mapper: CheckedFunction[T, U]) -> Outcome[U]:
        """Apply ``mapper`` to a Success value; a raising mapper yields a Failure."""
        _require_callable(mapper, "mapper")
        match self:
            case Success(value):
                return _attempt(lambda: Success(mapper(value)))
        return self  # type: ignore[return-value]

    def flat_map[U](self, mapper: CheckedFunction[T, Outcome[U]]) -> Outcome[U]:
        """Apply ``mapper`` to a Success value and return the Outcome it produces."""
        _require_callable(mapper, "mapper")
        match self:
            case Success(value):
                return _attempt(lambda: _expect_outcome(mapper(value), "flat_map"))
        return self  # type: ignore[return-value]

    def filter(self, predicate: CheckedPredicate[T]) -> Outcome[T]:
        """Keep a Success only if ``predicate`` holds for its value.

        A rejected value becomes a Failure whose cause is a ``PredicateError``.
        """
        _require_callable(predicate, "predicate")
        match self:
            case Success(value):
                return _attempt(
                    lambda: self if predicate(value) else Failure(PredicateError(value))
                )
        return self

    def map_failure(
        self, mapper: CheckedFunction[BaseException, BaseException]
    ) -> Outcome[T]:
        """Replace the cause of a Failure with ``mapper(cause)``."""
        _require_callable(mapper, "mapper")
        match self:
            case Failure(cause):

                def body() -> Outcome[T]:
                    mapped = mapper(cause)
                    _require_exception(mapped, "map_failure result")
                    return Failure(mapped)

                return _attempt(body)
        return self

    def transform[U](
        self,
        on_success: CheckedFunction[T, Outcome[U]],
        on_failure: CheckedFunction[BaseException, Outcome[U]],
    ) -> Outcome[U]:
        """Continue with ``on_success(value)`` or ``on_failure(cause)``.

        Both functions must return an Outcome; whichever runs is guarded the
        same way as ``flat_map``.
        """
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        match self:
            case Failure(cause):
                return _attempt(lambda: _expect_outcome(on_failure(cause), "transform"))
        return self.flat_map(on_success)

    def fold[U](
        self,
        on_failure: CheckedFunction[BaseException, U],
        on_success: CheckedFunction[T, U],
    ) -> U:
        """Collapse to a plain value. Exceptions from either function propagate."""
        _require_callable(on_failure, "on_failure")
        _require_callable(on_success, "on_success")
        match self:
            case Success(value):
                return on_success(value)
            case Failure(cause):
                return on_failure(cause)
        raise AssertionError(f"unknown Outcome variant: {type(self).__name__}")

    def if_success(self, action: Consumer[T]) -> Outcome[T]:
        """Call ``action(value)`` on a Success and return this Outcome."""
        _require_callable(action, "action")
        match self:
            case Success(value):
                action(value)
        return self

    def if_failure(self, action: Consumer[BaseException]) -> Outcome[T]:
        """Call ``action(cause)`` on a Failure and return this Outcome."""
        _require_callable(action, "action")
        match self:
            case Failure(cause):
                action(cause)
        return self

    # --- Extraction ---

    def get(self) -> T:
        """Return the Success value.

        Raises:
            EmptyValueError: If this is a Failure (chained to its cause).
        """
        match self:
            case Success(value):
                return value
            case Failure(cause):
                raise EmptyValueError(
                    "Failure.get()",
                    hint="Check is_success() first, or use or_else()/fold().",
                ) from cause
        raise AssertionError(f"unknown Outcome variant: {type(self).__name__}")

    def get_cause(self) -> BaseException:
        """Return the Failure cause.

        Raises:
            EmptyValueError: If this is a Success.
        """
        match self:
            case Failure(cause):
                return cause
        raise EmptyValueError(
            "Success.get_cause()", hint="Check is_failure() first."
        )

    def or_else(self, other: T) -> T:
        match self:
            case Success(value):
                return value
        return other

    def or_else_get(self, supplier: Computation[T]) -> T:
        """Return the Success value, or call ``supplier`` for a fallback."""
        _require_callable(supplier, "supplier")
        match self:
            case Success(value):
                return value
        return supplier()

    def or_else_raise(
        self, mapper: CheckedFunction[BaseException, BaseException] | None = None
    ) -> T:
        """Return the Success value, or raise.

        Without ``mapper`` the original cause is re-raised as the same object.
        With ``mapper``, ``mapper(cause)`` is raised, chained to the cause.
        """
        if mapper is not None:
            _require_callable(mapper, "mapper")
        match self:
            case Success(value):
                return value
            case Failure(cause):
                if mapper is None:
                    raise cause
                _raise_mapped(mapper(cause), cause)
        raise AssertionError(f"unknown Outcome variant: {type(self).__name__}")

    # --- Sequence view ---

    def __iter__(self) -> OutcomeIterator[T]:
        return OutcomeIterator(self)


def _raise_mapped(mapped: Any, cause: BaseException) -> NoReturn:
    _require_exception(mapped, "or_else_raise mapper result")
    if mapped is cause:
        raise cause
    raise mapped from cause


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Success[T](Outcome[T]):
    """A successfully computed value."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Failure[T](Outcome[T]):
    """The exception that prevented a value from being computed."""

    cause: BaseException

    def __post_init__(self) -> None:
        _require_exception(self.cause, "cause")
        if is_fatal(self.cause):
            raise escalate(self.cause)

    def __repr__(self) -> str:
        return f"Failure({self.cause!r})"


class OutcomeIterator[T]:
    """Single-pass cursor over an Outcome: one item for Success, none for Failure.

    Draining the cursor does not affect the Outcome; ``iter(outcome)`` gives a
    fresh cursor.
    """

    __slots__ = ("_pending", "_value")

    def __init__(self, outcome: Outcome[T]) -> None:
        _require(
            condition=isinstance(outcome, Outcome),
            message=f"must be an Outcome, got {type(outcome).__name__}",
            field_name="outcome",
        )
        self._pending = False
        self._value: T | None = None
        match outcome:
            case Success(value):
                self._pending = True
                self._value = value

    def __iter__(self) -> OutcomeIterator[T]:
        return self

    def __next__(self) -> T:
        if not self._pending:
            raise StopIteration
        value = self._value
        self._pending = False
        self._value = None
        return value  # type: ignore[return-value]

    def __length_hint__(self) -> int:
        return 1 if self._pending else 0


__all__ = ["Failure", "Outcome", "OutcomeIterator", "Success"]
