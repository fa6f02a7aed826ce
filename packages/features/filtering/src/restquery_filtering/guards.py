"""Fail-fast argument checks shared by declarations and the builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from restquery_core.primitives.exceptions import ArgumentError

from .exceptions import SortTypeNotAllowedError

if TYPE_CHECKING:
    from collections.abc import Iterable


def require_non_empty_string(value: Any, argument: str) -> str:
    if not isinstance(value, str):
        raise ArgumentError(argument, f"expected a string, got {type(value).__name__}")
    if value == "":
        raise ArgumentError(argument, "must not be empty")
    return value


def require_string_list(values: Iterable[Any], argument: str) -> list[str]:
    items = list(values)
    for index, value in enumerate(items):
        if not isinstance(value, str):
            raise ArgumentError(
                argument,
                f"item {index} is {type(value).__name__}, expected a string",
            )
    return items


def require_type(value: Any, expected: type, argument: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"{argument}: expected {expected.__name__}, got {type(value).__name__}"
        )


def require_allowed_sort_type(value: Any, allowed: frozenset[str]) -> str:
    if not isinstance(value, str) or value not in allowed:
        raise SortTypeNotAllowedError(value, allowed)
    return value
