"""Pydantic models for the data-entry flow.

Covers the validation outcome, user-visible notifications, the overall
result of a form submission and the form definition served to clients.
"""

from datetime import date

from pydantic import BaseModel

from app.models.enums import Department, NotificationVariant, UserRole
from app.models.listing import ProfileTableView
from app.models.profile import ProfileInput


class ValidationResult(BaseModel):
    """Either a normalized record or field-keyed error messages."""
    record: ProfileInput | None = None
    errors: dict[str, str] = {}

    @property
    def is_valid(self) -> bool:
        return self.record is not None and not self.errors


class Notification(BaseModel):
    """A toast-style message for the user."""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.default


class EntryOutcome(BaseModel):
    """Result of one pass through validate -> submit -> refresh."""
    ok: bool
    field_errors: dict[str, str] = {}
    notification: Notification | None = None
    table: ProfileTableView | None = None


class SelectOption(BaseModel):
    value: str
    label: str


class FormDefaults(BaseModel):
    """Initial values of the entry form."""
    full_name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    department: Department = Department.it
    role: UserRole = UserRole.employee
    hire_date: date | None = None


class FormDefinition(BaseModel):
    """Defaults and picker options for the entry form."""
    defaults: FormDefaults
    departments: list[SelectOption]
    roles: list[SelectOption]
