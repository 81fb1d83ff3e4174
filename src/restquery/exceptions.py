"""Custom exceptions for restquery."""

from __future__ import annotations

from typing import Any


class RestQueryError(Exception):
    """Base exception for all restquery errors."""


class MalformedParameterError(RestQueryError, ValueError):
    """Raised when a numeric pagination parameter cannot be parsed as an integer."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Malformed numeric parameter {key!r}: {value!r}")
