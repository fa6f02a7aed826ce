"""DenormalizationListener — validates top-level objects after deserialization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..primitives.exceptions import UnprocessableEntityError
from ..validation.composite import default_body_validator
from ..validation.validatable import Validatable
from .events import DenormalizationFinishedEvent
from .models import ValidationErrorModel

if TYPE_CHECKING:
    from ..ports.validation import IValidator

logger = logging.getLogger(__name__)


class DenormalizationListener:
    """Runs a validator over each deserialized top-level object.

    Nested objects (``depth != 0``) are skipped; they are validated as part
    of their root. Objects that are not :class:`Validatable` pass through.
    Any validation error fails the request with
    :class:`UnprocessableEntityError`, one error model per reported message
    in :meth:`ValidationResult.iter_errors` order (grouped by field).

    Without an explicit validator the schema is checked first and the
    object's invariants only when the schema holds.

    Usage::

        dispatcher = EventDispatcher()
        dispatcher.register_listener(DenormalizationListener())
    """

    def __init__(self, validator: IValidator | None = None) -> None:
        if validator is None:
            validator = default_body_validator()
        self._validator = validator

    @property
    def channel(self) -> type[DenormalizationFinishedEvent]:
        return DenormalizationFinishedEvent

    def on_event(self, event: DenormalizationFinishedEvent) -> None:
        if event.depth != 0:
            return

        obj = event.denormalized_object
        if not isinstance(obj, Validatable):
            return

        result = self._validator.validate(obj)
        if result.is_valid:
            return

        error_models = ValidationErrorModel.from_result(result)
        logger.info(
            "%s failed validation with %d error(s)",
            type(obj).__name__,
            len(error_models),
        )
        raise UnprocessableEntityError(error_models)
