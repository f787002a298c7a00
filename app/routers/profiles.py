"""Profile entry and listing endpoints.

GET  /form -- defaults and picker options for the entry form.
POST /     -- validate and insert a profile, then refresh the listing.
GET  /     -- refresh the listing and return the rendered table.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body
from starlette.responses import JSONResponse

from app.models.entry import FormDefinition
from app.models.listing import ProfileTableView
from app.services.entry import build_form_definition, process_entry
from app.services.listing import get_profile_listing, render_profiles_table

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/form", response_model=FormDefinition)
def profile_form() -> FormDefinition:
    """Return the entry form definition."""
    return build_form_definition()


@router.post("", status_code=201)
def create_profile(payload: Any = Body(default=None)) -> Any:
    """Submit a profile.

    Returns 422 with ``field_errors`` on invalid input (nothing is
    inserted), 502 with a generic notification when the insert fails, and
    201 with the notification and the refreshed table on success.
    """
    outcome = process_entry(payload, get_profile_listing())

    if outcome.field_errors:
        return JSONResponse(
            status_code=422,
            content=outcome.model_dump(mode="json", include={"ok", "field_errors"}),
        )
    if not outcome.ok:
        return JSONResponse(
            status_code=502,
            content=outcome.model_dump(mode="json", include={"ok", "notification"}),
        )
    return outcome.model_dump(mode="json")


@router.get("", response_model=ProfileTableView)
def list_profiles() -> ProfileTableView:
    """Re-fetch all profiles ordered by name.

    A failed fetch still answers 200 with the previously held rows.
    """
    state = get_profile_listing().refresh()
    return render_profiles_table(state)
