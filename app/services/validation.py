"""Profile validation service.

Runs candidate form input through ``ProfileInput`` and converts pydantic
errors into one human-readable message per field.  Pure and synchronous:
invalid input never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.core.constants import FIELD_ERROR_MESSAGES, REQUIRED_MESSAGE
from app.models.entry import ValidationResult
from app.models.profile import ProfileInput

logger = logging.getLogger(__name__)


def _message_for(error: dict[str, Any]) -> tuple[str, str]:
    """Map a single pydantic error to ``(field, message)``."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "__root__"

    if error.get("type") == "missing":
        return field, REQUIRED_MESSAGE
    return field, FIELD_ERROR_MESSAGES.get(field, str(error.get("msg", "Invalid value")))


def validate_profile(data: Mapping[str, Any] | None) -> ValidationResult:
    """Validate raw form input.

    Returns a ``ValidationResult`` holding either the normalized
    ``ProfileInput`` (role defaulted, blank optionals set to ``None``) or a
    ``{field: message}`` mapping with the first error of each field.
    """
    if not isinstance(data, Mapping):
        return ValidationResult(errors={"__root__": "Expected an object"})

    try:
        record = ProfileInput.model_validate(dict(data))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field, message = _message_for(error)
            errors.setdefault(field, message)
        logger.debug("profile_validation_failed", extra={"fields": sorted(errors)})
        return ValidationResult(errors=errors)

    return ValidationResult(record=record)
