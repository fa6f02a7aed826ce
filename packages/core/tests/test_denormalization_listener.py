"""Tests for DenormalizationListener."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from pydantic import BaseModel, Field

from restquery_core.events.dispatcher import EventDispatcher
from restquery_core.ports.validation import IValidator
from restquery_core.primitives.exceptions import UnprocessableEntityError
from restquery_core.serialization.events import DenormalizationFinishedEvent
from restquery_core.serialization.listener import DenormalizationListener
from restquery_core.validation.pydantic import PydanticValidator
from restquery_core.validation.result import ValidationResult
from restquery_core.validation.validatable import Validatable


class Address(Validatable, BaseModel):
    city: str = Field(..., min_length=1)


class Customer(Validatable, BaseModel):
    name: str = Field(..., min_length=2)
    email: str = Field(..., pattern=r".+@.+")
    address: Address | None = None


class Order(Validatable, BaseModel):
    customer_id: int = Field(alias="customerId")


class Booking(Validatable, BaseModel):
    nights: int

    def validate_invariants(self) -> ValidationResult:
        result = ValidationResult.success()
        if self.nights > 30:
            result.add_error("nights", "must not exceed 30")
        return result


class Unchecked(BaseModel):
    name: str


@pytest.fixture
def validator() -> Mock:
    mock = Mock(spec=IValidator)
    mock.validate.return_value = ValidationResult.success()
    return mock


def test_channel_is_denormalization_finished() -> None:
    listener = DenormalizationListener(PydanticValidator())
    assert listener.channel is DenormalizationFinishedEvent


def test_nested_objects_are_skipped(validator: Mock) -> None:
    listener = DenormalizationListener(validator)

    listener.on_event(DenormalizationFinishedEvent(Address(city="Athens"), depth=1))

    validator.validate.assert_not_called()


def test_non_validatable_objects_are_skipped(validator: Mock) -> None:
    listener = DenormalizationListener(validator)

    listener.on_event(DenormalizationFinishedEvent(Unchecked(name="x"), depth=0))

    validator.validate.assert_not_called()


def test_valid_top_level_object_passes(validator: Mock) -> None:
    listener = DenormalizationListener(validator)
    customer = Customer(name="Ada", email="ada@example.com")

    listener.on_event(DenormalizationFinishedEvent(customer, depth=0))

    validator.validate.assert_called_once_with(customer)


def test_errors_raise_unprocessable_entity_in_reported_order(validator: Mock) -> None:
    validator.validate.return_value = ValidationResult.failure(
        {"name": ["too short"], "email": ["invalid", "missing domain"]}
    )
    listener = DenormalizationListener(validator)

    with pytest.raises(UnprocessableEntityError) as exc_info:
        listener.on_event(
            DenormalizationFinishedEvent(Customer(name="Ada", email="a@b"), depth=0)
        )

    assert [(e.field, e.message) for e in exc_info.value.errors] == [
        ("name", "too short"),
        ("email", "invalid"),
        ("email", "missing domain"),
    ]


def test_end_to_end_through_dispatcher() -> None:
    dispatcher: EventDispatcher[object] = EventDispatcher()
    dispatcher.register_listener(DenormalizationListener())
    broken = Customer.model_construct(name="A", email="nope", address=None)

    with pytest.raises(UnprocessableEntityError) as exc_info:
        dispatcher.dispatch([DenormalizationFinishedEvent(broken, depth=0)])

    payload = exc_info.value.to_payload()
    assert [error["field"] for error in payload["errors"]] == ["name", "email"]


@pytest.mark.parametrize(
    "listener",
    [DenormalizationListener(), DenormalizationListener(PydanticValidator())],
    ids=["default", "schema-only"],
)
def test_aliased_fields_pass(listener: DenormalizationListener) -> None:
    order = Order.model_validate({"customerId": 7})

    listener.on_event(DenormalizationFinishedEvent(order, depth=0))


def test_default_listener_checks_invariants() -> None:
    listener = DenormalizationListener()

    with pytest.raises(UnprocessableEntityError) as exc_info:
        listener.on_event(DenormalizationFinishedEvent(Booking(nights=40), depth=0))

    assert exc_info.value.to_payload() == {
        "errors": [{"field": "nights", "message": "must not exceed 30"}]
    }


def test_default_listener_skips_invariants_on_schema_errors() -> None:
    listener = DenormalizationListener()
    broken = Booking.model_construct(nights="forty")

    with pytest.raises(UnprocessableEntityError) as exc_info:
        listener.on_event(DenormalizationFinishedEvent(broken, depth=0))

    messages = [error.message for error in exc_info.value.errors]
    assert "must not exceed 30" not in messages
