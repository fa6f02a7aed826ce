"""Stock IQueryValidator implementations."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class NotEmptyValidator:
    """Rejects ``None``, empty strings and empty collections."""

    def __init__(self, *, strip: bool = False) -> None:
        self._strip = strip

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return (value.strip() if self._strip else value) != ""
        if hasattr(value, "__len__"):
            return len(value) > 0
        return True


class ChoiceValidator:
    """Accepts values from a fixed set; lists must be entirely within it."""

    def __init__(self, choices: Iterable[Any]) -> None:
        self.choices = frozenset(choices)

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, (list, tuple)):
            return all(item in self.choices for item in value)
        return value in self.choices


class RegexValidator:
    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and self.pattern.fullmatch(value) is not None


class LengthValidator:
    """Bounds ``len(value)``; either bound may be omitted."""

    def __init__(
        self, *, min_length: int | None = None, max_length: int | None = None
    ) -> None:
        self.min_length = min_length
        self.max_length = max_length

    def is_valid(self, value: Any) -> bool:
        try:
            length = len(value)
        except TypeError:
            return False
        if self.min_length is not None and length < self.min_length:
            return False
        return self.max_length is None or length <= self.max_length


class RangeValidator:
    """Bounds a comparable value (numbers, dates); both bounds inclusive."""

    def __init__(self, *, minimum: Any = None, maximum: Any = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def is_valid(self, value: Any) -> bool:
        try:
            if self.minimum is not None and value < self.minimum:
                return False
            return self.maximum is None or value <= self.maximum
        except TypeError:
            return False


class TypeAdapterValidator:
    """Accepts values pydantic can validate as *type_* (strict by default).

    Usage::

        TypeAdapterValidator(conint(ge=1, le=100))
        TypeAdapterValidator(datetime.date, strict=False)
    """

    def __init__(self, type_: Any, *, strict: bool = True) -> None:
        self._adapter: TypeAdapter[Any] = TypeAdapter(type_)
        self._strict = strict

    def is_valid(self, value: Any) -> bool:
        try:
            self._adapter.validate_python(value, strict=self._strict)
        except PydanticValidationError:
            return False
        return True


class CallableValidator:
    """Wraps a plain predicate."""

    def __init__(self, predicate: Callable[[Any], bool], name: str | None = None) -> None:
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", "predicate")

    def is_valid(self, value: Any) -> bool:
        return bool(self._predicate(value))

    def __repr__(self) -> str:
        return f"CallableValidator({self.name})"
