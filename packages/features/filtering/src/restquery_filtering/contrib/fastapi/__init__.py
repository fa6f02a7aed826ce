"""FastAPI integration (requires the ``fastapi`` extra)."""

from __future__ import annotations

from .dependencies import query_model, validated_body
from .handlers import (
    http_error_handler,
    install_exception_handlers,
    unprocessable_entity_handler,
)

__all__ = [
    "http_error_handler",
    "install_exception_handlers",
    "query_model",
    "unprocessable_entity_handler",
    "validated_body",
]
