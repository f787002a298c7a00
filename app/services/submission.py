"""Profile submission service.

Attaches a client-generated id and creation timestamps to a validated
profile and inserts it into the ``profiles`` table with a single call.
Boundary errors are logged and re-raised unchanged; there is no retry.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from app.core.config import settings
from app.db.supabase import get_supabase
from app.models.profile import ProfileCreate, ProfileInput

logger = logging.getLogger(__name__)


def build_profile_row(profile: ProfileInput) -> ProfileCreate:
    """Return the insert payload for *profile* with a fresh id and timestamps."""
    now = datetime.now(timezone.utc)
    return ProfileCreate(
        **profile.model_dump(),
        id=uuid4(),
        created_at=now,
        updated_at=now,
    )


def submit_profile(profile: ProfileInput) -> None:
    """Insert *profile* as a new row.

    Exactly one insert is attempted.  Any exception raised by the Supabase
    client propagates to the caller.
    """
    row = build_profile_row(profile)
    client = get_supabase()

    try:
        client.table(settings.PROFILES_TABLE).insert(
            [row.model_dump(mode="json")]
        ).execute()
    except Exception as exc:
        logger.error(
            "profile_insert_failed",
            extra={
                "profile_id": str(row.id),
                "username": row.username,
                "error_message": str(exc),
            },
        )
        raise

    logger.info(
        "profile_inserted",
        extra={"profile_id": str(row.id), "username": row.username},
    )
