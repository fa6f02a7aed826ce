"""Shared fixtures for filtering tests."""

from __future__ import annotations

import pytest

from restquery_filtering.builder import QueryModelBuilder
from restquery_filtering.elements import ValidationFailure


class RecordingValidator:
    """Validator that records every value it sees."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[object] = []

    def is_valid(self, value: object) -> bool:
        self.calls.append(value)
        return self.result


@pytest.fixture
def make_validator() -> type[RecordingValidator]:
    return RecordingValidator


@pytest.fixture
def failures() -> list[ValidationFailure]:
    return []


@pytest.fixture
def builder(failures: list[ValidationFailure]) -> QueryModelBuilder:
    """Builder reporting validation failures into the ``failures`` fixture."""
    return QueryModelBuilder.create(on_validation_failed=failures.append)
