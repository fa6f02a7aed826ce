"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ArgumentError,
    ConfigurationError,
    HttpError,
    RestQueryError,
    UnprocessableEntityError,
    ValidationError,
)

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "HttpError",
    "RestQueryError",
    "UnprocessableEntityError",
    "ValidationError",
]
