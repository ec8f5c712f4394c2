"""Exceptions raised by the package and basic sanity checks."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["RmwError", "InvalidArgumentError", "check_zero_string_array"]


class RmwError(Exception):
    """Base class for errors reported by the middleware types."""


class InvalidArgumentError(RmwError, ValueError):
    """An argument was missing or held a value that is not allowed."""


def check_zero_string_array(array: Sequence[str] | None) -> None:
    """Raise RmwError unless ``array`` is an existing, empty string array."""
    if array is None:
        raise RmwError("array is null")
    if len(array) != 0:
        raise RmwError("array size is not zero")