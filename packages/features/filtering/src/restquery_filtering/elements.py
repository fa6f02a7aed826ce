"""Query and sort element declarations, plus their per-build resolutions.

Declarations are immutable and may be shared by concurrent builds. Every
build produces fresh :class:`ResolvedQueryElement` /
:class:`ResolvedSortElement` records instead of writing back onto them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .guards import require_non_empty_string

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports import IQueryValidator

    QueryFilter = Callable[[str], Any]
    ValidationFailedListener = Callable[["ValidationFailure"], None]


@dataclass(frozen=True)
class ValidationFailure:
    """Diagnostic for a query value rejected by one of its validators."""

    query_key: str
    value: Any
    validator: IQueryValidator


@dataclass(frozen=True)
class QueryElementModel:
    """One accepted query parameter: key, optional filter, ordered validators.

    Usage::

        status = (
            QueryElementModel.create("status")
            .with_filter(str.lower)
            .with_validators(ChoiceValidator({"open", "closed"}))
        )
    """

    query_key: str
    filter: QueryFilter | None = None
    validators: tuple[IQueryValidator, ...] = ()
    on_validation_failed: tuple[ValidationFailedListener, ...] = field(
        default=(), compare=False
    )

    def __post_init__(self) -> None:
        require_non_empty_string(self.query_key, "query_key")
        object.__setattr__(self, "validators", tuple(self.validators))
        object.__setattr__(
            self, "on_validation_failed", tuple(self.on_validation_failed)
        )

    @classmethod
    def create(cls, query_key: str) -> QueryElementModel:
        return cls(query_key=query_key)

    def with_filter(self, query_filter: QueryFilter | None) -> QueryElementModel:
        return replace(self, filter=query_filter)

    def with_validators(self, *validators: IQueryValidator) -> QueryElementModel:
        return replace(self, validators=self.validators + validators)

    def with_validation_failed_listener(
        self, listener: ValidationFailedListener
    ) -> QueryElementModel:
        return replace(
            self, on_validation_failed=(*self.on_validation_failed, listener)
        )

    def fire_validation_failed(
        self, validator: IQueryValidator, value: Any
    ) -> ValidationFailure:
        """Notify every listener synchronously; return values are ignored."""
        failure = ValidationFailure(self.query_key, value, validator)
        for listener in self.on_validation_failed:
            listener(failure)
        return failure


@dataclass(frozen=True)
class SortQueryElementModel:
    """One accepted sort key.

    ``descending`` is only the direction used when the element is included
    because it is a default; an explicitly requested key takes the direction
    of the query key it was requested through.
    """

    query_key: str
    type: str = "string"
    is_default: bool = False
    descending: bool = False

    def __post_init__(self) -> None:
        require_non_empty_string(self.query_key, "query_key")
        require_non_empty_string(self.type, "type")

    @classmethod
    def create(
        cls,
        query_key: str,
        type: str = "string",  # noqa: A002
        is_default: bool = False,
        descending: bool = False,
    ) -> SortQueryElementModel:
        return cls(
            query_key=query_key,
            type=type,
            is_default=is_default,
            descending=descending,
        )

    def as_default(self, descending: bool | None = None) -> SortQueryElementModel:
        if descending is None:
            return replace(self, is_default=True)
        return replace(self, is_default=True, descending=descending)


# ── Per-build resolutions ────────────────────────────────────────────


@dataclass(frozen=True)
class ResolvedQueryElement:
    model: QueryElementModel
    value: Any

    @property
    def query_key(self) -> str:
        return self.model.query_key


@dataclass(frozen=True)
class ResolvedSortElement:
    model: SortQueryElementModel
    descending: bool

    @property
    def query_key(self) -> str:
        return self.model.query_key

    @property
    def type(self) -> str:
        return self.model.type

    @property
    def is_default(self) -> bool:
        return self.model.is_default

    @property
    def direction(self) -> str:
        return "desc" if self.descending else "asc"
