"""Events published by a deserialization pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DenormalizationFinishedEvent:
    """Published once an object has been built from request data.

    ``depth`` is the nesting level of the object within the deserialized
    graph; ``0`` is the top-level object.
    """

    denormalized_object: Any
    depth: int = 0
