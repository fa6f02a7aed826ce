"""Post-deserialization validation: events, listener, error payload models."""

from __future__ import annotations

from .events import DenormalizationFinishedEvent
from .listener import DenormalizationListener
from .models import ValidationErrorModel

__all__ = [
    "DenormalizationFinishedEvent",
    "DenormalizationListener",
    "ValidationErrorModel",
]
