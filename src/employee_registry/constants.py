"""Global constants for the employee registry.

This module centralizes values shared by the store, the exporters and the
presentation layers so that every entry point agrees on them.
"""

# Name of the single storage entry holding the serialized employee list.
STORAGE_KEY = "employees"

# Seconds between background saves.
AUTOSAVE_INTERVAL_SECONDS = 30.0

# Prefix used when generating employee identifiers (e.g. EMP12345607).
EMPLOYEE_ID_PREFIX = "EMP"

DEFAULT_DEPARTMENTS = ("IT", "HR", "Finance", "Marketing", "Sales")

# Column titles for CSV export, in field order.
CSV_HEADERS = (
    "Employee ID",
    "Employee Code",
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Department",
    "Position",
    "Salary",
    "Date of Joining",
)
