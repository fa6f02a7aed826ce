"""IParameterBag, IQueryValidator — collaborator protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IParameterBag(Protocol):
    """Key -> string lookup over request query parameters.

    ``dict``, Starlette ``QueryParams`` and Werkzeug ``MultiDict`` all fit.
    """

    def get(self, key: str) -> str | None:
        """Return the raw value for *key*, or ``None`` when absent."""
        ...


@runtime_checkable
class IQueryValidator(Protocol):
    """Accepts or rejects a single (filtered) query value."""

    def is_valid(self, value: Any) -> bool:
        ...
