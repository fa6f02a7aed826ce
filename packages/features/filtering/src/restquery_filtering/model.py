"""QueryModel — the immutable result of one build."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .elements import ResolvedQueryElement, ResolvedSortElement, ValidationFailure


@dataclass(frozen=True)
class QueryModel:
    """Accepted query and sort elements, in declaration order.

    ``validation_failures`` lists every element rejected by a validator
    during the build that produced this model.
    """

    accepted_query_elements: tuple[ResolvedQueryElement, ...] = ()
    accepted_sort_elements: tuple[ResolvedSortElement, ...] = ()
    validation_failures: tuple[ValidationFailure, ...] = ()

    def has(self, query_key: str) -> bool:
        return any(e.query_key == query_key for e in self.accepted_query_elements)

    def get(self, query_key: str, default: Any = None) -> Any:
        for element in self.accepted_query_elements:
            if element.query_key == query_key:
                return element.value
        return default

    def as_dict(self) -> dict[str, Any]:
        return {e.query_key: e.value for e in self.accepted_query_elements}

    @property
    def sort_keys(self) -> list[tuple[str, str]]:
        """``(key, "asc" | "desc")`` pairs, ready for a repository."""
        return [(e.query_key, e.direction) for e in self.accepted_sort_elements]
