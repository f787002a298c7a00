"""Enum types mirroring the PostgreSQL custom enums of the ``profiles`` table."""

from enum import Enum


class Department(str, Enum):
    """``department_type``: the fixed set of company departments."""
    it = "IT"
    hr = "HR"
    accounting = "Λογιστήριο"
    sales = "Πωλήσεις"
    management = "Διοίκηση"
    secretariat = "Γραμματεία"
    marketing = "Marketing"
    carriers = "Μεταφορείς"
    customer_service = "Εξυπηρέτηση_Πελατών"
    legal = "Νομικά"


class UserRole(str, Enum):
    """``user_role``: plain labels, not enforced as permissions here."""
    super_admin = "SUPER_ADMIN"
    admin = "ADMIN"
    manager = "MANAGER"
    supervisor = "SUPERVISOR"
    employee = "EMPLOYEE"
    readonly = "READONLY"


DEFAULT_ROLE: UserRole = UserRole.employee


class NotificationVariant(str, Enum):
    """Presentation hint for a user-visible notification."""
    default = "default"
    destructive = "destructive"
