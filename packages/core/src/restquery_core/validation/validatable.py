"""Validatable — opt-in marker for objects validated after deserialization."""

from __future__ import annotations

from typing import Any

from .result import ValidationResult


class Validatable:
    """Mixin marking an object as subject to post-deserialization validation.

    Only objects carrying this mixin are handed to the validator by
    :class:`~restquery_core.serialization.listener.DenormalizationListener`.
    Override :meth:`validate_invariants` for cross-field rules the schema
    cannot express.

    Usage::

        class CreateOrder(Validatable, BaseModel):
            min_price: int
            max_price: int

            def validate_invariants(self) -> ValidationResult:
                result = ValidationResult.success()
                if self.min_price > self.max_price:
                    result.add_error("min_price", "must not exceed max_price")
                return result
    """

    def validate_invariants(self) -> ValidationResult:
        return ValidationResult.success()


class InvariantValidator:
    """Runs :meth:`Validatable.validate_invariants`; other objects pass."""

    def validate(self, obj: Any) -> ValidationResult:
        if isinstance(obj, Validatable):
            return obj.validate_invariants()
        return ValidationResult.success()
