"""ValidationResult — structured validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field


def default_errors_factory() -> dict[str, list[str]]:
    """Factory for the mutable default dict of :class:`ValidationResult`."""
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    Errors are grouped per field. Fields keep the order in which each was
    first reported, and a field's messages keep their reporting order, so
    ``{a: [m1], b: [m2]}`` merged with ``{a: [m3]}`` reads m1, m3, m2.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"name": ["is required"]})
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one; messages join their field's group."""
        merged = dict(self.errors)
        for field_name, messages in other.errors.items():
            existing = merged.get(field_name, [])
            merged[field_name] = existing + messages
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        self.errors.setdefault(field_name, []).append(message)

    def iter_errors(self) -> list[tuple[str, str]]:
        """Flatten to ``(field, message)`` pairs, field group by field group."""
        return [
            (field_name, message)
            for field_name, messages in self.errors.items()
            for message in messages
        ]

    def __len__(self) -> int:
        return sum(len(messages) for messages in self.errors.values())

    def __bool__(self) -> bool:
        return self.is_valid
