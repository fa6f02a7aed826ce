"""Tests for stock query validators and filters."""

from __future__ import annotations

import datetime

import pytest
from pydantic import conint

from restquery_filtering import filters
from restquery_filtering.builder import QueryModelBuilder
from restquery_filtering.elements import QueryElementModel
from restquery_filtering.ports import IQueryValidator
from restquery_filtering.validators import (
    CallableValidator,
    ChoiceValidator,
    LengthValidator,
    NotEmptyValidator,
    RangeValidator,
    RegexValidator,
    TypeAdapterValidator,
)


@pytest.mark.parametrize(
    ("validator", "value", "expected"),
    [
        (NotEmptyValidator(), "x", True),
        (NotEmptyValidator(), "", False),
        (NotEmptyValidator(), "  ", True),
        (NotEmptyValidator(strip=True), "  ", False),
        (NotEmptyValidator(), [], False),
        (NotEmptyValidator(), None, False),
        (NotEmptyValidator(), 0, True),
        (ChoiceValidator({"open", "closed"}), "open", True),
        (ChoiceValidator({"open", "closed"}), "pending", False),
        (ChoiceValidator({"open", "closed"}), ["open", "closed"], True),
        (ChoiceValidator({"open", "closed"}), ["open", "x"], False),
        (RegexValidator(r"[a-z]+"), "abc", True),
        (RegexValidator(r"[a-z]+"), "abc1", False),
        (RegexValidator(r"[a-z]+"), 5, False),
        (LengthValidator(min_length=2, max_length=3), "ab", True),
        (LengthValidator(min_length=2, max_length=3), "a", False),
        (LengthValidator(max_length=3), "abcd", False),
        (LengthValidator(min_length=1), 5, False),
        (RangeValidator(minimum=1, maximum=10), 10, True),
        (RangeValidator(minimum=1, maximum=10), 0, False),
        (RangeValidator(minimum=datetime.date(2024, 1, 1)), datetime.date(2025, 1, 1), True),
        (RangeValidator(minimum=1), "a", False),
        (TypeAdapterValidator(conint(ge=1, le=100)), 50, True),
        (TypeAdapterValidator(conint(ge=1, le=100)), 500, False),
        (TypeAdapterValidator(int), "5", False),
        (TypeAdapterValidator(int, strict=False), "5", True),
        (CallableValidator(str.isdigit), "123", True),
        (CallableValidator(str.isdigit), "12a", False),
    ],
)
def test_validators(validator: IQueryValidator, value: object, expected: bool) -> None:
    assert validator.is_valid(value) is expected
    assert isinstance(validator, IQueryValidator)


def test_callable_validator_repr() -> None:
    assert repr(CallableValidator(str.isdigit)) == "CallableValidator(isdigit)"


def test_to_bool() -> None:
    assert filters.to_bool(" Yes ") is True
    assert filters.to_bool("0") is False
    assert filters.to_bool("maybe") is None


def test_split_list_and_compose() -> None:
    tags = filters.compose(filters.lower, filters.split_list())
    assert tags("A, b,,C ") == ["a", "b", "c"]
    assert filters.split_list("|")("x|y") == ["x", "y"]


def test_numeric_filters() -> None:
    assert filters.to_int("7") == 7
    assert filters.to_float("1.5") == 1.5
    assert filters.strip(" x ") == "x"


def test_filters_and_validators_in_builder() -> None:
    builder = (
        QueryModelBuilder.create()
        .add_query_element_model(
            QueryElementModel.create("tags")
            .with_filter(filters.split_list())
            .with_validators(NotEmptyValidator(), ChoiceValidator({"red", "blue"}))
        )
        .add_query_element_model(
            QueryElementModel.create("page_size")
            .with_filter(filters.to_int)
            .with_validators(RangeValidator(minimum=1, maximum=50))
        )
    )

    query = builder.build_from_query_parameters_bag(
        {"tags": "red,blue", "page_size": "500"}
    )

    assert query.as_dict() == {"tags": ["red", "blue"]}
    assert [f.query_key for f in query.validation_failures] == ["page_size"]
