"""QueryConfig — query-string key names and allowed sort key types."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_SORT_BY_KEY = "sort_by"
DEFAULT_SORT_BY_DESCENDING_KEY = "sort_by_descending"
DEFAULT_SORT_KEY_TYPES: frozenset[str] = frozenset(
    {"string", "number", "date", "datetime", "boolean"}
)


class QueryConfig(BaseModel):
    """Immutable configuration owned by a single QueryModelBuilder.

    Options:
        sort_by_key: query key listing the keys to sort ascending by.
        sort_by_descending_key: query key read when ``sort_by_key`` is absent;
            keys listed there sort descending.
        allowed_sort_key_types: types a sort element may declare.
    """

    model_config = ConfigDict(frozen=True)

    sort_by_key: str = Field(default=DEFAULT_SORT_BY_KEY, min_length=1)
    sort_by_descending_key: str = Field(
        default=DEFAULT_SORT_BY_DESCENDING_KEY, min_length=1
    )
    allowed_sort_key_types: frozenset[str] = Field(
        default=DEFAULT_SORT_KEY_TYPES, min_length=1
    )

    @model_validator(mode="after")
    def _distinct_sort_keys(self) -> QueryConfig:
        if self.sort_by_key == self.sort_by_descending_key:
            raise ValueError("sort_by_key and sort_by_descending_key must differ")
        return self

    @classmethod
    def create(cls, **options: Any) -> QueryConfig:
        """Build a config; omitted options keep their defaults."""
        return cls(**options)

    def is_allowed_sort_key_type(self, sort_key_type: str) -> bool:
        return sort_key_type in self.allowed_sort_key_types
