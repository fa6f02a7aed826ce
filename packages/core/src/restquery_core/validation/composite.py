"""CompositeValidator — staged validator chain for deserialized bodies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .pydantic import PydanticValidator
from .result import ValidationResult
from .validatable import InvariantValidator

if TYPE_CHECKING:
    from ..ports.validation import IValidator

logger = logging.getLogger(__name__)


class CompositeValidator:
    """Runs validators in order and merges what they report.

    With ``stop_on_failure`` the chain ends at the first stage that reports
    errors; later stages may then assume the earlier ones passed (invariant
    checks can rely on well-typed fields). Without it, every stage runs.
    """

    def __init__(
        self,
        validators: list[IValidator] | None = None,
        *,
        stop_on_failure: bool = False,
    ) -> None:
        self._stages: list[IValidator] = list(validators or [])
        self._stop_on_failure = stop_on_failure

    def add(self, validator: IValidator) -> CompositeValidator:
        self._stages.append(validator)
        return self

    @property
    def stages(self) -> tuple[IValidator, ...]:
        return tuple(self._stages)

    def validate(self, obj: Any) -> ValidationResult:
        report = ValidationResult.success()
        for stage in self._stages:
            stage_report = stage.validate(obj)
            report = report.merge(stage_report)
            if self._stop_on_failure and not stage_report.is_valid:
                logger.debug(
                    "%s stopped at %s",
                    type(obj).__name__,
                    type(stage).__name__,
                )
                break
        return report


def default_body_validator() -> CompositeValidator:
    """Schema first, then :class:`Validatable` invariants on a well-formed body."""
    return CompositeValidator(
        [PydanticValidator(), InvariantValidator()], stop_on_failure=True
    )
