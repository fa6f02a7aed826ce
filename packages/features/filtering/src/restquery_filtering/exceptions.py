"""Filtering package exceptions."""

from __future__ import annotations

from restquery_core.primitives.exceptions import ConfigurationError


class SortTypeNotAllowedError(ConfigurationError):
    """Raised when a sort element declares a type outside the allowed set."""

    def __init__(self, sort_key_type: object, allowed: frozenset[str]) -> None:
        self.sort_key_type = sort_key_type
        self.allowed = allowed
        super().__init__(
            "type",
            f"{sort_key_type!r} is not one of {sorted(allowed)!r}",
        )
