"""Result pattern for explicit error handling.

Provides Success and Failure types to replace exception-based control flow.
Both variants expose the same operation set, so calling code can either
branch on ``is_ok``/``is_fail`` or chain transformations without branching.

Example:
    >>> def parse(raw: str) -> Result[int, str]:
    ...     if raw.isdigit():
    ...         return Success(int(raw))
    ...     return Failure(f"not a number: {raw!r}")
    >>> parse("21").map(lambda n: n * 2)
    Success(value=42)
    >>> parse("x").map(lambda n: n * 2).unwrap_or(0)
    0
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeGuard, TypeVar

from resultant.exceptions import UnwrapOnFailureError
from resultant.shared.config import get_settings
from resultant.shared.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")
E = TypeVar("E")
NextV = TypeVar("NextV")
NextE = TypeVar("NextE")


@dataclass(frozen=True, slots=True)
class Success(Generic[V, E]):
    """Successful result.

    Attributes:
        value: The value produced by the operation
    """

    value: V

    @property
    def is_ok(self) -> Literal[True]:
        """Always True for a success."""
        return True

    @property
    def is_fail(self) -> Literal[False]:
        """Always False for a success."""
        return False

    def map(self, fn: Callable[[V], NextV]) -> Success[NextV, E]:
        """Apply ``fn`` to the value and wrap the outcome."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[V], Result[NextV, E]]) -> Result[NextV, E]:
        """Return ``fn(value)`` without wrapping it again."""
        return fn(self.value)

    def map_fails(self, fn: Callable[[E], NextE]) -> Success[V, NextE]:
        """Keep the value; ``fn`` is never called."""
        return Success(self.value)

    def flip(self) -> Failure[E, V]:
        """Turn the value into the error of a Failure."""
        return Failure(self.value)

    def unwrap(self) -> V:
        """Get the value."""
        return self.value

    def unwrap_or(self, default: V) -> V:
        """Get the value, ignoring ``default``."""
        return self.value

    def unwrap_or_else(self, fn: Callable[[], V]) -> V:
        """Get the value; ``fn`` is never called."""
        return self.value

    def expect(self, message: str) -> V:
        """Get the value, ignoring ``message``."""
        return self.value

    def and_(self, other: Result[NextV, E]) -> Result[NextV, E]:
        """Discard this value and return ``other``."""
        return other

    def or_(self, other: Result[V, E]) -> Success[V, E]:
        """Return self."""
        return self

    def unwrap_or_get_errors(self) -> V:
        """Get the value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[V, E]):
    """Failed result.

    Attributes:
        error: The error value describing why the operation failed
    """

    error: E

    @property
    def is_ok(self) -> Literal[False]:
        """Always False for a failure."""
        return False

    @property
    def is_fail(self) -> Literal[True]:
        """Always True for a failure."""
        return True

    def map(self, fn: Callable[[V], NextV]) -> Failure[NextV, E]:
        """Keep the error; ``fn`` is never called."""
        return Failure(self.error)

    def flat_map(self, fn: Callable[[V], Result[NextV, E]]) -> Failure[NextV, E]:
        """Short-circuit with the same error; ``fn`` is never called."""
        return Failure(self.error)

    def map_fails(self, fn: Callable[[E], NextE]) -> Failure[V, NextE]:
        """Apply ``fn`` to the error and wrap the outcome."""
        return Failure(fn(self.error))

    def flip(self) -> Success[E, V]:
        """Turn the error into the value of a Success."""
        return Success(self.error)

    def unwrap(self) -> NoReturn:
        """Raise UnwrapOnFailureError with the configured generic message."""
        self._raise(get_settings().unwrap_message)

    def unwrap_or(self, default: V) -> V:
        """Get ``default``."""
        return default

    def unwrap_or_else(self, fn: Callable[[], V]) -> V:
        """Compute the fallback value by calling ``fn``."""
        return fn()

    def expect(self, message: str) -> NoReturn:
        """Raise UnwrapOnFailureError carrying ``message``."""
        self._raise(message)

    def and_(self, other: Result[NextV, E]) -> Failure[NextV, E]:
        """Keep the error and discard ``other``.

        ``other`` is already evaluated by the time it is passed in, so any
        side effect of building it has happened regardless.
        """
        return Failure(self.error)

    def or_(self, other: Result[V, E]) -> Result[V, E]:
        """Return ``other``."""
        return other

    def unwrap_or_get_errors(self) -> E:
        """Get the error."""
        return self.error

    def _raise(self, message: str) -> NoReturn:
        logger.debug("unwrap_on_failure", reason=message, error=self.error)
        raise UnwrapOnFailureError(message, self.error)


# Type alias
Result = Success[V, E] | Failure[V, E]


def ok(value: V) -> Success[V, E]:
    """Create a Success result.

    Args:
        value: The success value

    Returns:
        Success wrapping the value
    """
    return Success(value)


def err(error: E) -> Failure[V, E]:
    """Create a Failure result.

    Args:
        error: The error value

    Returns:
        Failure wrapping the error
    """
    return Failure(error)


def is_success(result: Result[V, E]) -> TypeGuard[Success[V, E]]:
    """Narrow ``result`` to Success for type checkers."""
    return isinstance(result, Success)


def is_failure(result: Result[V, E]) -> TypeGuard[Failure[V, E]]:
    """Narrow ``result`` to Failure for type checkers."""
    return isinstance(result, Failure)
