"""Pydantic models for the profiles listing view.

``ListingState`` is the explicit state of the listing; ``ProfileTableView``
is what ``render_profiles_table`` derives from it.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.models.profile import Profile


class ListingState(BaseModel):
    """Immutable snapshot of the listing: held rows plus the loading flag."""
    model_config = ConfigDict(frozen=True)

    profiles: tuple[Profile, ...] = ()
    loading: bool = False
    last_fetched_at: datetime | None = None


class TableColumn(BaseModel):
    key: str
    header: str


class ProfileTableRow(BaseModel):
    """One rendered table row, keyed by profile id."""
    key: str
    cells: list[str]


class ProfileTableView(BaseModel):
    """Rendered profiles table plus the state of its trigger button."""
    columns: list[TableColumn]
    rows: list[ProfileTableRow] = []
    has_rows: bool = False
    action_label: str
    action_disabled: bool = False
