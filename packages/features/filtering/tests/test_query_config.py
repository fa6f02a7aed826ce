"""Tests for QueryConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from restquery_filtering.config import DEFAULT_SORT_KEY_TYPES, QueryConfig


def test_defaults() -> None:
    config = QueryConfig.create()
    assert config.sort_by_key == "sort_by"
    assert config.sort_by_descending_key == "sort_by_descending"
    assert config.allowed_sort_key_types == DEFAULT_SORT_KEY_TYPES
    assert {"string", "number", "date"} <= config.allowed_sort_key_types


def test_overrides_keep_other_defaults() -> None:
    config = QueryConfig.create(sort_by_key="order", allowed_sort_key_types={"string"})
    assert config.sort_by_key == "order"
    assert config.sort_by_descending_key == "sort_by_descending"
    assert config.allowed_sort_key_types == frozenset({"string"})
    assert config.is_allowed_sort_key_type("string")
    assert not config.is_allowed_sort_key_type("number")


def test_is_immutable() -> None:
    config = QueryConfig()
    with pytest.raises(ValidationError):
        config.sort_by_key = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "options",
    [
        {"sort_by_key": ""},
        {"sort_by_descending_key": ""},
        {"allowed_sort_key_types": set()},
        {"sort_by_key": "sort", "sort_by_descending_key": "sort"},
    ],
)
def test_rejects_invalid_options(options: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        QueryConfig.create(**options)
