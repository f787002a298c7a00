"""Data-entry flow: validate -> submit -> refresh listing.

The listing is refreshed only after the insert has returned successfully.
Validation errors stop the flow before any insert; an insert failure
produces a generic notification and no refresh.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from app.core.constants import (
    DEPARTMENT_LABELS,
    ROLE_LABELS,
    SUBMIT_FAILURE_DESCRIPTION,
    SUBMIT_FAILURE_TITLE,
    SUBMIT_SUCCESS_DESCRIPTION,
    SUBMIT_SUCCESS_TITLE,
)
from app.models.entry import (
    EntryOutcome,
    FormDefaults,
    FormDefinition,
    Notification,
    SelectOption,
)
from app.models.enums import Department, NotificationVariant, UserRole
from app.services.listing import ProfileListing, render_profiles_table
from app.services.submission import submit_profile
from app.services.validation import validate_profile

logger = logging.getLogger(__name__)


def process_entry(
    data: Mapping[str, Any] | None,
    listing: ProfileListing,
) -> EntryOutcome:
    """Run one form submission end to end and return what the user sees."""
    validation = validate_profile(data)
    if not validation.is_valid:
        return EntryOutcome(ok=False, field_errors=validation.errors)

    try:
        submit_profile(validation.record)
    except Exception as exc:
        logger.error(
            "entry_submission_failed",
            extra={"error_type": type(exc).__name__},
        )
        return EntryOutcome(
            ok=False,
            notification=Notification(
                title=SUBMIT_FAILURE_TITLE,
                description=SUBMIT_FAILURE_DESCRIPTION,
                variant=NotificationVariant.destructive,
            ),
        )

    state = listing.refresh(after_write=True)
    return EntryOutcome(
        ok=True,
        notification=Notification(
            title=SUBMIT_SUCCESS_TITLE,
            description=SUBMIT_SUCCESS_DESCRIPTION,
        ),
        table=render_profiles_table(state),
    )


def build_form_definition(today: date | None = None) -> FormDefinition:
    """Return the entry form defaults and picker options.

    ``hire_date`` defaults to *today* (the current date when omitted).
    """
    return FormDefinition(
        defaults=FormDefaults(hire_date=today or date.today()),
        departments=[
            SelectOption(value=d.value, label=DEPARTMENT_LABELS.get(d.value, d.value))
            for d in Department
        ],
        roles=[
            SelectOption(value=UserRole(value).value, label=label)
            for value, label in ROLE_LABELS.items()
        ],
    )
