"""Utility functions for working with results."""
from __future__ import annotations

from typing import Any, TypeVar, overload

from resultant.result import Failure, Result, Success
from resultant.shared.logging import get_logger

logger = get_logger(__name__)

V1 = TypeVar("V1")
V2 = TypeVar("V2")
V3 = TypeVar("V3")
V4 = TypeVar("V4")
V5 = TypeVar("V5")
E1 = TypeVar("E1")
E2 = TypeVar("E2")
E3 = TypeVar("E3")
E4 = TypeVar("E4")
E5 = TypeVar("E5")


@overload
def combine() -> Result[tuple[()], list[Any]]: ...


@overload
def combine(r1: Result[V1, E1], /) -> Result[tuple[V1], list[E1]]: ...


@overload
def combine(
    r1: Result[V1, E1],
    r2: Result[V2, E2],
    /,
) -> Result[tuple[V1, V2], list[E1 | E2]]: ...


@overload
def combine(
    r1: Result[V1, E1],
    r2: Result[V2, E2],
    r3: Result[V3, E3],
    /,
) -> Result[tuple[V1, V2, V3], list[E1 | E2 | E3]]: ...


@overload
def combine(
    r1: Result[V1, E1],
    r2: Result[V2, E2],
    r3: Result[V3, E3],
    r4: Result[V4, E4],
    /,
) -> Result[tuple[V1, V2, V3, V4], list[E1 | E2 | E3 | E4]]: ...


@overload
def combine(
    r1: Result[V1, E1],
    r2: Result[V2, E2],
    r3: Result[V3, E3],
    r4: Result[V4, E4],
    r5: Result[V5, E5],
    /,
) -> Result[tuple[V1, V2, V3, V4, V5], list[E1 | E2 | E3 | E4 | E5]]: ...


@overload
def combine(*results: Result[Any, Any]) -> Result[tuple[Any, ...], list[Any]]: ...


def combine(*results: Result[Any, Any]) -> Result[tuple[Any, ...], list[Any]]:
    """Combine several results into a single result.

    Every input is inspected. If any of them failed, the returned Failure
    holds the errors of all failing inputs, in input order. Otherwise the
    returned Success holds a tuple of all values, each at the index of the
    result it came from.

    Up to five arguments keep each value's type in the success tuple; with
    more arguments the tuple and error list are typed as ``Any``.

    Args:
        *results: Results to combine

    Returns:
        Success with the tuple of values, or Failure with the list of errors

    Example:
        >>> combine(Success(1), Success("a"))
        Success(value=(1, 'a'))
        >>> combine(Failure("x"), Success(1), Failure("y"))
        Failure(error=['x', 'y'])
        >>> combine()
        Success(value=())
    """
    errors = [r.error for r in results if isinstance(r, Failure)]

    logger.debug("results_combined", total=len(results), failures=len(errors))

    if errors:
        return Failure(errors)
    return Success(tuple(r.unwrap() for r in results))
