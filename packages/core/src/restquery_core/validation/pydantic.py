"""PydanticValidator — schema validation for deserialized pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult


def errors_from_pydantic(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Convert a pydantic ``ValidationError`` into ``{field: [messages]}``."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        msg = error.get("msg", "validation error")
        errors.setdefault(loc, []).append(msg)
    return errors


class PydanticValidator:
    """Re-checks a model instance against its own schema.

    The instance is dumped by alias so that models declaring
    ``Field(alias=...)`` round-trip through their validation input shape.
    Objects without ``model_validate`` always pass.
    """

    def validate(self, obj: Any) -> ValidationResult:
        if not hasattr(obj, "model_validate"):
            return ValidationResult.success()

        try:
            type(obj).model_validate(obj.model_dump(by_alias=True))
        except PydanticValidationError as exc:
            return ValidationResult.failure(errors_from_pydantic(exc))
        return ValidationResult.success()
