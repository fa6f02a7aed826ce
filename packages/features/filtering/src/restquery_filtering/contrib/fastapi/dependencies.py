"""FastAPI dependencies for query binding and body validation.

Provides Depends functions that build a QueryModel from the request query
string and deserialize + validate JSON request bodies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from restquery_core.primitives.exceptions import UnprocessableEntityError
from restquery_core.serialization import (
    DenormalizationFinishedEvent,
    ValidationErrorModel,
)
from restquery_core.validation import ValidationResult, errors_from_pydantic

from ...model import QueryModel

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import BaseModel

    from restquery_core.ports import IEventDispatcher

    from ...builder import QueryModelBuilder


def query_model(builder: QueryModelBuilder) -> Callable[[Request], QueryModel]:
    """Create a dependency that binds the query string through *builder*.

    Args:
        builder: A fully declared QueryModelBuilder, shared by all requests.

    Returns:
        Dependency function.

    Example:
        ```python
        orders_query = (
            QueryModelBuilder.create()
            .add_query_element("status")
            .add_default_sort_query_element_list("created_at")
        )

        @router.get("/orders")
        def list_orders(query: QueryModel = Depends(query_model(orders_query))):
            return repository.search(query.as_dict(), sort=query.sort_keys)
        ```
    """

    def dependency(request: Request) -> QueryModel:
        return builder.build_from_request(request)

    return dependency


def validated_body(
    model_cls: type[BaseModel],
    dispatcher: IEventDispatcher[Any],
) -> Callable[[Request], Awaitable[Any]]:
    """Create a dependency that deserializes the JSON body into *model_cls*.

    Schema errors are reported as 422 straight away. The resulting object is
    then published as a top-level ``DenormalizationFinishedEvent`` so that
    registered listeners (typically a DenormalizationListener) can reject it.

    Args:
        model_cls: Pydantic model describing the body.
        dispatcher: Dispatcher the denormalization event is published on.

    Returns:
        Dependency function.

    Raises:
        UnprocessableEntityError: body is not JSON, does not match the
            schema, or a listener rejected it.
    """

    async def dependency(request: Request) -> Any:
        try:
            payload = await request.json()
        except ValueError as err:
            raise UnprocessableEntityError(
                [ValidationErrorModel.create("__root__", "Request body is not valid JSON")]
            ) from err
        try:
            obj = model_cls.model_validate(payload)
        except PydanticValidationError as exc:
            result = ValidationResult.failure(errors_from_pydantic(exc))
            raise UnprocessableEntityError(
                ValidationErrorModel.from_result(result)
            ) from exc
        dispatcher.dispatch([DenormalizationFinishedEvent(obj, depth=0)])
        return obj

    return dependency
