"""API query binding — declared query elements and sort keys -> QueryModel."""

from __future__ import annotations

from .builder import QueryModelBuilder
from .config import QueryConfig
from .elements import (
    QueryElementModel,
    ResolvedQueryElement,
    ResolvedSortElement,
    SortQueryElementModel,
    ValidationFailure,
)
from .exceptions import SortTypeNotAllowedError
from .model import QueryModel
from .ports import IParameterBag, IQueryValidator
from .validators import (
    CallableValidator,
    ChoiceValidator,
    LengthValidator,
    NotEmptyValidator,
    RangeValidator,
    RegexValidator,
    TypeAdapterValidator,
)

__all__ = [
    "CallableValidator",
    "ChoiceValidator",
    "IParameterBag",
    "IQueryValidator",
    "LengthValidator",
    "NotEmptyValidator",
    "QueryConfig",
    "QueryElementModel",
    "QueryModel",
    "QueryModelBuilder",
    "RangeValidator",
    "RegexValidator",
    "ResolvedQueryElement",
    "ResolvedSortElement",
    "SortQueryElementModel",
    "SortTypeNotAllowedError",
    "TypeAdapterValidator",
    "ValidationFailure",
]
