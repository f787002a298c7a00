"""Application constants.

Contains validation messages, display labels and user-facing notification
texts for the profile entry form.
"""

# ---------------------------------------------------------------------------
# Validation limits
# ---------------------------------------------------------------------------
FULL_NAME_MIN_LENGTH: int = 2
USERNAME_MIN_LENGTH: int = 3

# ---------------------------------------------------------------------------
# Field error messages (shown inline next to each field)
# ---------------------------------------------------------------------------
REQUIRED_MESSAGE: str = "Required"

FIELD_ERROR_MESSAGES: dict[str, str] = {
    "full_name": f"Full name must be at least {FULL_NAME_MIN_LENGTH} characters",
    "username": f"Username must be at least {USERNAME_MIN_LENGTH} characters",
    "email": "Invalid email address",
    "phone": "Phone must be text",
    "address": "Address must be text",
    "department": "Invalid department",
    "role": "Invalid role",
    "hire_date": "Hire date must be a valid date (YYYY-MM-DD)",
}

# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------
DEPARTMENT_LABELS: dict[str, str] = {
    "IT": "IT",
    "HR": "HR",
    "Λογιστήριο": "Λογιστήριο",
    "Πωλήσεις": "Πωλήσεις",
    "Διοίκηση": "Διοίκηση",
    "Γραμματεία": "Γραμματεία",
    "Marketing": "Marketing",
    "Μεταφορείς": "Μεταφορείς",
    "Εξυπηρέτηση_Πελατών": "Εξυπηρέτηση Πελατών",
    "Νομικά": "Νομικά",
}

# Order matches the role picker: least to most privileged, read-only last.
ROLE_LABELS: dict[str, str] = {
    "EMPLOYEE": "Employee",
    "SUPERVISOR": "Supervisor",
    "MANAGER": "Manager",
    "ADMIN": "Admin",
    "SUPER_ADMIN": "Super Admin",
    "READONLY": "Read Only",
}

# (field, header) pairs rendered by the profiles table
PROFILE_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("full_name", "Full Name"),
    ("username", "Username"),
    ("email", "Email"),
    ("department", "Department"),
    ("role", "Role"),
]

LIST_ACTION_LABEL: str = "Show All Profiles"
LIST_ACTION_LOADING_LABEL: str = "Loading..."

# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------
SUBMIT_SUCCESS_TITLE: str = "Success!"
SUBMIT_SUCCESS_DESCRIPTION: str = "Form submitted successfully"
SUBMIT_FAILURE_TITLE: str = "Error"
SUBMIT_FAILURE_DESCRIPTION: str = "Something went wrong. Please try again."
