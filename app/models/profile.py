"""Pydantic models for the ``profiles`` table.

``ProfileInput`` is the validation schema for the entry form.  ``id`` and the
timestamps are attached by the submission path (``ProfileCreate``); the audit
columns ``created_by`` / ``updated_by`` are never written here and are
therefore read-only in ``Profile``.
"""

import re
from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.constants import FULL_NAME_MIN_LENGTH, USERNAME_MIN_LENGTH
from app.models.enums import DEFAULT_ROLE, Department, UserRole


_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ProfileInput(BaseModel):
    """Normalized employee profile as entered on the form."""
    model_config = ConfigDict(extra="ignore")

    full_name: str = Field(min_length=FULL_NAME_MIN_LENGTH)
    username: str = Field(min_length=USERNAME_MIN_LENGTH)
    email: EmailStr
    phone: str | None = None
    address: str | None = None
    department: Department
    role: UserRole = DEFAULT_ROLE
    hire_date: date | None = None

    @field_validator("phone", "address", mode="before")
    @classmethod
    def _blank_text_to_none(cls, value: Any) -> Any:
        return None if _is_blank(value) else value

    @field_validator("role", mode="before")
    @classmethod
    def _default_role(cls, value: Any) -> Any:
        return DEFAULT_ROLE if _is_blank(value) else value

    @field_validator("hire_date", mode="before")
    @classmethod
    def _parse_hire_date(cls, value: Any) -> Any:
        """Accept only ``YYYY-MM-DD`` strings (or ``date`` objects)."""
        if _is_blank(value):
            return None
        if isinstance(value, datetime):
            raise ValueError("hire_date must be a date, not a timestamp")
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError("hire_date must be a date string")
        text = value.strip()
        if not _ISO_DATE.fullmatch(text):
            raise ValueError("hire_date must be formatted as YYYY-MM-DD")
        return date.fromisoformat(text)


class ProfileCreate(ProfileInput):
    """Payload for inserting a profile, with client-generated identity."""
    id: UUID
    created_at: datetime
    updated_at: datetime


class Profile(BaseModel):
    """Full profile record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str
    username: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    department: Department
    role: UserRole = DEFAULT_ROLE
    hire_date: date | None = None
    created_at: datetime
    updated_at: datetime
    created_by: UUID | None = None  # read-only
    updated_by: UUID | None = None  # read-only
