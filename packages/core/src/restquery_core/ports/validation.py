"""IValidator — port for validating a deserialized object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Reports field-level errors for one object; never raises for bad data.

    Implementations: ``PydanticValidator`` (schema), ``InvariantValidator``
    (cross-field rules) and ``CompositeValidator`` (ordered stages).
    """

    def validate(self, obj: Any) -> ValidationResult:
        ...
