"""Validation system: ValidationResult and staged validators."""

from __future__ import annotations

from .composite import CompositeValidator, default_body_validator
from .pydantic import PydanticValidator, errors_from_pydantic
from .result import ValidationResult
from .validatable import InvariantValidator, Validatable

__all__ = [
    "CompositeValidator",
    "InvariantValidator",
    "PydanticValidator",
    "Validatable",
    "ValidationResult",
    "default_body_validator",
    "errors_from_pydantic",
]
