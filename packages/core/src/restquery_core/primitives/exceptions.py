"""Argument, validation and HTTP-facing exceptions for restquery-core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..serialization.models import ValidationErrorModel


class RestQueryError(Exception):
    """Root exception for the entire restquery toolkit."""


class ArgumentError(RestQueryError, ValueError):
    """Raised when a declaration receives a missing, empty or malformed argument.

    Usage: Builders raise this synchronously from the declaration call; it
    marks a caller bug and is never recovered from.
    """

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class ConfigurationError(ArgumentError):
    """Raised when a declaration conflicts with the active configuration.

    Example: a sort element whose type is outside the allowed sort key types.
    """


class ValidationError(RestQueryError):
    """Raised when object validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


# ── HTTP-facing Exceptions ───────────────────────────────────────────


class HttpError(RestQueryError):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: Any = None) -> None:
        self.detail = detail
        super().__init__(f"HTTP {self.status_code}: {detail!r}")


class UnprocessableEntityError(HttpError):
    """Raised when a deserialized request body fails validation.

    Carries one :class:`ValidationErrorModel` per validation error, in
    :meth:`ValidationResult.iter_errors` order.
    """

    status_code = 422

    def __init__(self, errors: list[ValidationErrorModel]) -> None:
        self.errors = list(errors)
        super().__init__(self.errors)

    def to_payload(self) -> dict[str, Any]:
        """Return the client-facing JSON body."""
        return {"errors": [error.model_dump() for error in self.errors]}
