"""Helpers shared by the Streamlit page for turning records into widgets and tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import pandas as pd

from .logging_utils import get_logger
from .schemas import EmployeeRecord, ValidationError
from .storage import PersistenceError
from .store import RejectionReason, StoreResult

logger = get_logger(__name__)

TABLE_COLUMNS = (
    "Employee ID",
    "Employee Code",
    "Name",
    "Email",
    "Phone",
    "Department",
    "Position",
    "Salary",
    "Date of Joining",
)

ALL_DEPARTMENTS = "All departments"


def records_table(records: Sequence[EmployeeRecord]) -> pd.DataFrame:
    """Build the display table, with formatted salary and joining date."""
    rows = [
        (
            record.employee_id,
            record.employee_code,
            record.full_name,
            record.email,
            record.phone,
            record.department,
            record.position,
            record.formatted_salary,
            record.formatted_joining_date,
        )
        for record in records
    ]
    return pd.DataFrame(rows, columns=list(TABLE_COLUMNS))


def map_validation_errors(error: ValidationError) -> Dict[str, List[str]]:
    """Convert a ValidationError into a mapping of field -> messages."""

    field_errors: Dict[str, List[str]] = {}
    for issue in error.errors():
        loc = str(issue.get("loc", ["record"])[0])
        field_errors.setdefault(loc, []).append(issue.get("msg"))
    return field_errors


def form_defaults(record: Optional[EmployeeRecord], *, employee_id: str = "", department: str = "") -> Dict[str, Any]:
    """Initial widget values for the add form (no record) or the edit form."""
    if record is None:
        return {
            "employeeId": employee_id,
            "employeeCode": "",
            "firstName": "",
            "lastName": "",
            "email": "",
            "phone": "",
            "department": department,
            "position": "",
            "salary": 0.0,
            "dateOfJoining": date.today(),
        }
    values = record.to_storage()
    values["salary"] = float(record.salary)
    values["dateOfJoining"] = record.date_of_joining
    values.pop("dateAdded", None)
    return values


def department_options(departments: Sequence[str], current: str = "") -> List[str]:
    """Department choices, keeping a legacy value that is not configured."""
    options = list(departments)
    if current and current not in options:
        options.append(current)
    return options


@dataclass(frozen=True)
class Notice:
    """Message shown after a store operation, plus per-field validation errors."""

    kind: str
    message: str
    field_errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.kind == "success"


def run_store_action(action: Callable[[], Union[StoreResult, bool]], success_message: str) -> Notice:
    """Run an add, update or remove and describe its outcome for the page.

    ``remove`` reports a missing employee by returning False; it is shown as
    a not-found rejection.
    """
    try:
        outcome = action()
    except ValidationError as err:
        logger.warning("Validation failed: %s", err)
        return Notice("error", "Please correct the highlighted fields.", map_validation_errors(err))
    except PersistenceError as err:
        logger.exception("Could not persist employees")
        return Notice("error", f"Could not save employees: {err}")

    if isinstance(outcome, bool):
        outcome = StoreResult() if outcome else StoreResult(reason=RejectionReason.NOT_FOUND)
    if outcome.ok:
        return Notice("success", success_message)
    return Notice("error", outcome.reason.message)


__all__ = [
    "ALL_DEPARTMENTS",
    "Notice",
    "TABLE_COLUMNS",
    "department_options",
    "form_defaults",
    "map_validation_errors",
    "records_table",
    "run_store_action",
]
