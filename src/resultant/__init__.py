"""resultant.

A minimal algebraic result type: an operation ends in either a Success
carrying a value or a Failure carrying an error value.
"""
from __future__ import annotations

__version__ = "0.1.0"

from resultant.exceptions import ResultError, UnwrapOnFailureError
from resultant.result import (
    Failure,
    Result,
    Success,
    err,
    is_failure,
    is_success,
    ok,
)
from resultant.utils import combine

__all__ = [
    "Success", "Failure", "Result",
    "ok", "err", "is_success", "is_failure",
    "combine",
    "ResultError", "UnwrapOnFailureError",
    "__version__",
]
