"""Exceptions raised by resultant.

Represented failures travel inside ``Failure`` and are never raised. The
exceptions here signal caller misuse only.
"""
from __future__ import annotations

from typing import Any


class ResultError(Exception):
    """Base exception for errors raised by resultant."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class UnwrapOnFailureError(ResultError):
    """Raised when ``unwrap()`` or ``expect()`` is called on a ``Failure``.

    The caller asserted success without checking. This is a logic error,
    not a recoverable condition.

    Attributes:
        error: The error payload held by the unwrapped ``Failure``
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message, {"error": error})
        self.error = error
