"""QueryModelBuilder — request query parameters -> QueryModel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .config import QueryConfig
from .elements import (
    QueryElementModel,
    ResolvedQueryElement,
    ResolvedSortElement,
    SortQueryElementModel,
)
from .guards import (
    require_allowed_sort_type,
    require_non_empty_string,
    require_string_list,
    require_type,
)
from .model import QueryModel

if TYPE_CHECKING:
    from collections.abc import Callable

    from .elements import ValidationFailure
    from .ports import IParameterBag

logger = logging.getLogger(__name__)

SORT_KEY_SEPARATOR = ","


class QueryModelBuilder:
    """Declares the query parameters and sort keys an endpoint accepts.

    Configure once per endpoint, then call :meth:`build_from_request` (or
    :meth:`build_from_query_parameters_bag`) per request. Declarations are
    immutable and every build allocates its own result records, so a fully
    declared builder can be shared between requests.

    Usage::

        builder = (
            QueryModelBuilder.create()
            .add_query_element_list("status", "owner")
            .add_sort_query_element("created_at", "date", is_default=True)
            .add_sort_query_element_list("name", "priority")
        )
        query = builder.build_from_query_parameters_bag(
            {"status": "open", "sort_by_descending": "priority"}
        )
    """

    def __init__(
        self,
        query_config: QueryConfig | None = None,
        *,
        on_validation_failed: Callable[[ValidationFailure], None] | None = None,
    ) -> None:
        if query_config is None:
            query_config = QueryConfig()
        else:
            require_type(query_config, QueryConfig, "query_config")
        self._query_config = query_config
        self._on_validation_failed = on_validation_failed
        self._query_element_models: list[QueryElementModel] = []
        self._sort_query_element_models: list[SortQueryElementModel] = []

    @classmethod
    def create(
        cls,
        query_config: QueryConfig | None = None,
        *,
        on_validation_failed: Callable[[ValidationFailure], None] | None = None,
    ) -> QueryModelBuilder:
        return cls(query_config, on_validation_failed=on_validation_failed)

    # ── Introspection ────────────────────────────────────────────

    @property
    def config(self) -> QueryConfig:
        return self._query_config

    @property
    def query_elements(self) -> tuple[QueryElementModel, ...]:
        return tuple(self._query_element_models)

    @property
    def sort_elements(self) -> tuple[SortQueryElementModel, ...]:
        return tuple(self._sort_query_element_models)

    # ── Query element declarations ───────────────────────────────

    def add_query_element(self, query_element: str) -> QueryModelBuilder:
        require_non_empty_string(query_element, "query_element")
        self._query_element_models.append(QueryElementModel.create(query_element))
        return self

    def add_query_element_list(self, *query_element_list: str) -> QueryModelBuilder:
        for query_element in require_string_list(
            query_element_list, "query_element_list"
        ):
            self.add_query_element(query_element)
        return self

    def add_query_element_model(
        self, query_element: QueryElementModel
    ) -> QueryModelBuilder:
        """Append a pre-configured declaration (filter, validators) as-is."""
        require_type(query_element, QueryElementModel, "query_element")
        self._query_element_models.append(query_element)
        return self

    # ── Sort element declarations ────────────────────────────────

    def add_sort_query_element(
        self,
        sort_query_element: str,
        type: str = "string",  # noqa: A002
        is_default: bool = False,
    ) -> QueryModelBuilder:
        require_non_empty_string(sort_query_element, "sort_query_element")
        require_allowed_sort_type(type, self._query_config.allowed_sort_key_types)
        self._sort_query_element_models.append(
            SortQueryElementModel.create(
                sort_query_element, type=type, is_default=is_default
            )
        )
        return self

    def add_sort_query_element_list(
        self, *sort_query_element_list: str
    ) -> QueryModelBuilder:
        """Declare non-default sort keys of the default ``"string"`` type."""
        for sort_query_element in require_string_list(
            sort_query_element_list, "sort_query_element_list"
        ):
            self.add_sort_query_element(sort_query_element, is_default=False)
        return self

    def add_default_sort_query_element_list(
        self, *sort_query_element_list: str
    ) -> QueryModelBuilder:
        """Declare default sort keys of the default ``"string"`` type."""
        for sort_query_element in require_string_list(
            sort_query_element_list, "sort_query_element_list"
        ):
            self.add_sort_query_element(sort_query_element, is_default=True)
        return self

    def add_sort_query_element_model(
        self, sort_query_element: SortQueryElementModel
    ) -> QueryModelBuilder:
        require_type(sort_query_element, SortQueryElementModel, "sort_query_element")
        require_allowed_sort_type(
            sort_query_element.type, self._query_config.allowed_sort_key_types
        )
        self._sort_query_element_models.append(sort_query_element)
        return self

    # ── Resolution ───────────────────────────────────────────────

    def build_from_request(self, request: Any) -> QueryModel:
        """Build from a request exposing ``.query`` or ``.query_params``."""
        bag = getattr(request, "query", None)
        if bag is None:
            bag = getattr(request, "query_params", None)
        if bag is None:
            raise TypeError(
                f"request: {type(request).__name__} exposes no query parameters"
            )
        return self.build_from_query_parameters_bag(bag)

    def build_from_query_parameters_bag(self, bag: IParameterBag) -> QueryModel:
        failures: list[ValidationFailure] = []
        query_elements = self._resolve_query_elements(bag, failures)
        sort_elements = self._resolve_sort_elements(bag)
        return QueryModel(
            accepted_query_elements=tuple(query_elements),
            accepted_sort_elements=tuple(sort_elements),
            validation_failures=tuple(failures),
        )

    def _resolve_query_elements(
        self, bag: IParameterBag, failures: list[ValidationFailure]
    ) -> list[ResolvedQueryElement]:
        resolved: list[ResolvedQueryElement] = []
        for model in self._query_element_models:
            query_value = bag.get(model.query_key)
            if query_value is None:
                continue

            if model.filter is not None:
                query_value = model.filter(query_value)

            failure = self._first_failure(model, query_value)
            if failure is not None:
                failures.append(failure)
                continue

            resolved.append(ResolvedQueryElement(model=model, value=query_value))
        return resolved

    def _first_failure(
        self, model: QueryElementModel, value: Any
    ) -> ValidationFailure | None:
        for validator in model.validators:
            if validator.is_valid(value) is True:
                continue
            logger.info(
                "Query element %r rejected by %s",
                model.query_key,
                type(validator).__name__,
            )
            failure = model.fire_validation_failed(validator, value)
            if self._on_validation_failed is not None:
                self._on_validation_failed(failure)
            return failure
        return None

    def _requested_sort_keys(self, bag: IParameterBag) -> tuple[list[str], bool]:
        """Return the requested sort keys and whether they sort descending."""
        raw = bag.get(self._query_config.sort_by_key)
        descending = False
        if raw is None:
            raw = bag.get(self._query_config.sort_by_descending_key)
            descending = True
        if raw is None:
            return [], descending
        keys = [key for key in raw.split(SORT_KEY_SEPARATOR) if key != ""]
        return keys, descending

    def _resolve_sort_elements(self, bag: IParameterBag) -> list[ResolvedSortElement]:
        requested, descending = self._requested_sort_keys(bag)
        resolved: list[ResolvedSortElement] = []
        for model in self._sort_query_element_models:
            if not self._query_config.is_allowed_sort_key_type(model.type):
                logger.debug("Sort element %r has a disallowed type", model.query_key)
                continue
            if model.query_key in requested:
                resolved.append(ResolvedSortElement(model=model, descending=descending))
            elif model.is_default:
                resolved.append(
                    ResolvedSortElement(model=model, descending=model.descending)
                )
        return resolved
