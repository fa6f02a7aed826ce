"""restquery-core — Foundation package for the restquery toolkit.

Exceptions, validation primitives, synchronous event dispatch and the
post-deserialization validation listener. Pydantic is the only dependency.
"""

from __future__ import annotations

from .events import EventDispatcher
from .ports import IEventDispatcher, IEventListener, IValidator
from .primitives import (
    ArgumentError,
    ConfigurationError,
    HttpError,
    RestQueryError,
    UnprocessableEntityError,
    ValidationError,
)
from .serialization import (
    DenormalizationFinishedEvent,
    DenormalizationListener,
    ValidationErrorModel,
)
from .validation import (
    CompositeValidator,
    InvariantValidator,
    PydanticValidator,
    Validatable,
    ValidationResult,
    default_body_validator,
)

__all__ = [
    "ArgumentError",
    "CompositeValidator",
    "ConfigurationError",
    "DenormalizationFinishedEvent",
    "DenormalizationListener",
    "EventDispatcher",
    "HttpError",
    "IEventDispatcher",
    "IEventListener",
    "IValidator",
    "InvariantValidator",
    "PydanticValidator",
    "RestQueryError",
    "UnprocessableEntityError",
    "Validatable",
    "ValidationError",
    "ValidationErrorModel",
    "ValidationResult",
    "default_body_validator",
]
