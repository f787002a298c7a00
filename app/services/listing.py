"""Profiles listing service.

Fetches every row of ``profiles`` ordered by ``full_name`` and keeps the
result in an explicit, immutable ``ListingState``.

State machine: Idle -> Loading -> Idle(with data) on success, or back to
Idle with the previously held rows on failure.  Failures are only logged.
A refresh requested while another is in flight joins the in-flight fetch
instead of starting a second one, so the held state has a single writer.
A refresh that follows a write waits out any such fetch and starts its own,
so the written row is always visible in the state it returns.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, wait
from datetime import datetime, timezone
from enum import Enum

from app.core.config import settings
from app.core.constants import (
    LIST_ACTION_LABEL,
    LIST_ACTION_LOADING_LABEL,
    PROFILE_TABLE_COLUMNS,
)
from app.db.supabase import get_supabase
from app.models.listing import (
    ListingState,
    ProfileTableRow,
    ProfileTableView,
    TableColumn,
)
from app.models.profile import Profile

logger = logging.getLogger(__name__)


def fetch_profiles() -> list[Profile]:
    """Return all profiles ordered by ``full_name`` ascending.

    Ordering (including case and locale) is whatever the database applies.
    Raises whatever the Supabase client raises.
    """
    client = get_supabase()
    result = (
        client.table(settings.PROFILES_TABLE)
        .select("*")
        .order(settings.PROFILES_ORDER_COLUMN)
        .execute()
    )
    return [Profile(**row) for row in result.data or []]


class ProfileListing:
    """Holds the listing state and serializes overlapping refreshes."""

    def __init__(self, fetch: Callable[[], list[Profile]] | None = None) -> None:
        self._fetch = fetch
        self._lock = threading.Lock()
        self._state = ListingState()
        self._inflight: Future[ListingState] | None = None

    @property
    def state(self) -> ListingState:
        return self._state

    def refresh(self, after_write: bool = False) -> ListingState:
        """Re-fetch the table and return the resulting state.

        If a fetch is already running, wait for it and return its result.
        With *after_write*, a fetch that may have started before the write
        is not reused: wait for it to finish, then fetch again.
        """
        while True:
            with self._lock:
                inflight = self._inflight
                if inflight is None:
                    inflight = Future()
                    self._inflight = inflight
                    self._state = self._state.model_copy(update={"loading": True})
                    break

            if not after_write:
                logger.debug("profiles_refresh_joined")
                return inflight.result()

            logger.debug("profiles_refresh_waiting")
            wait([inflight])

        previous = self._state
        fetch = self._fetch or fetch_profiles
        new_state: ListingState | None = None
        try:
            try:
                profiles = fetch()
            except Exception:
                logger.exception("Error fetching profiles")
                new_state = previous.model_copy(update={"loading": False})
            else:
                new_state = ListingState(
                    profiles=tuple(profiles),
                    loading=False,
                    last_fetched_at=datetime.now(timezone.utc),
                )
                logger.info("profiles_fetched", extra={"count": len(profiles)})
        finally:
            with self._lock:
                if new_state is None:
                    self._state = previous.model_copy(update={"loading": False})
                else:
                    self._state = new_state
                self._inflight = None
            if new_state is None:
                inflight.set_exception(RuntimeError("profiles refresh aborted"))
            else:
                inflight.set_result(new_state)
        return new_state


def render_profiles_table(state: ListingState) -> ProfileTableView:
    """Render *state* as a table view.  Pure: no I/O, no mutation."""
    rows = [
        ProfileTableRow(
            key=str(profile.id),
            cells=[_cell(getattr(profile, field)) for field, _ in PROFILE_TABLE_COLUMNS],
        )
        for profile in state.profiles
    ]
    return ProfileTableView(
        columns=[TableColumn(key=k, header=h) for k, h in PROFILE_TABLE_COLUMNS],
        rows=rows,
        has_rows=bool(rows),
        action_label=LIST_ACTION_LOADING_LABEL if state.loading else LIST_ACTION_LABEL,
        action_disabled=state.loading,
    )


def _cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


_listing: ProfileListing | None = None
_listing_lock = threading.Lock()


def get_profile_listing() -> ProfileListing:
    """Return the process-wide listing, creating it on first call."""
    global _listing
    with _listing_lock:
        if _listing is None:
            _listing = ProfileListing()
        return _listing
