"""Stock query filters: raw string -> transformed value.

Filters are not guarded: a filter that raises fails the whole build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def strip(value: str) -> str:
    return value.strip()


def lower(value: str) -> str:
    return value.lower()


def to_int(value: str) -> int:
    return int(value)


def to_float(value: str) -> float:
    return float(value)


def to_bool(value: str) -> bool | None:
    """``"true"``/``"1"``/... -> True, ``"false"``/``"0"``/... -> False, else None."""
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    return None


def split_list(separator: str = ",") -> Callable[[str], list[str]]:
    """Return a filter splitting on *separator*, dropping blank items."""

    def _split(value: str) -> list[str]:
        return [part.strip() for part in value.split(separator) if part.strip()]

    return _split


def compose(*filters: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Apply *filters* left to right."""

    def _composed(value: Any) -> Any:
        for query_filter in filters:
            value = query_filter(value)
        return value

    return _composed
