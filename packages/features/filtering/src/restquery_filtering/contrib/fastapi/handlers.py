"""Render restquery HTTP errors as JSON responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from starlette.responses import JSONResponse

from restquery_core.primitives.exceptions import HttpError, UnprocessableEntityError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request


def unprocessable_entity_handler(request: Request, exc: Exception) -> JSONResponse:
    """422 with ``{"errors": [{"field": ..., "message": ...}, ...]}``."""
    error = cast(UnprocessableEntityError, exc)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def http_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = cast(HttpError, exc)
    return JSONResponse(
        status_code=error.status_code, content={"detail": str(error.detail)}
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the restquery error renderers on *app*."""
    app.add_exception_handler(UnprocessableEntityError, unprocessable_entity_handler)
    app.add_exception_handler(HttpError, http_error_handler)
