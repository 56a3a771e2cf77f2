"""Argument assertions shared by the endpoint catalog."""

from __future__ import annotations

from typing import TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T")


def require(value: T | None, name: str) -> T:
    """Return ``value`` or raise if it is missing.

    Strings must also be non-empty.

    Raises:
        InvalidArgumentError: If value is None or an empty string
    """
    if value is None:
        raise InvalidArgumentError(f"'{name}' cannot be null!")
    if isinstance(value, str) and not value:
        raise InvalidArgumentError(f"'{name}' cannot be empty!")
    return value

