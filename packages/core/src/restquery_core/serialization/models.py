"""ValidationErrorModel — one client-facing field error."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


class ValidationErrorModel(BaseModel):
    """A single ``{field, message}`` entry of an error payload."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str

    @classmethod
    def create(cls, field: str, message: str) -> ValidationErrorModel:
        return cls(field=field, message=message)

    @classmethod
    def from_result(cls, result: ValidationResult) -> list[ValidationErrorModel]:
        """One model per reported error, preserving the reporting order."""
        return [cls.create(field, message) for field, message in result.iter_errors()]
