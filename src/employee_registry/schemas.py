"""Pydantic models describing employee payloads and stored records."""

from __future__ import annotations

import random
import time
from datetime import date, datetime, timezone
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError
from pydantic.alias_generators import to_camel

from .constants import EMPLOYEE_ID_PREFIX


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO 8601 string with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_employee_id(
    prefix: str = EMPLOYEE_ID_PREFIX, *, now_ms: Optional[int] = None, rng: Optional[random.Random] = None
) -> str:
    """Build an identifier from the last six digits of the epoch milliseconds and two random digits."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = (rng or random).randint(0, 99)
    return f"{prefix}{str(now_ms)[-6:]}{suffix:02d}"


def format_plain_number(value: float) -> str:
    """Render a salary the way it appears in exports: ``75000`` or ``75000.5``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class EmployeeInput(BaseModel):
    """Fields a caller supplies when creating or editing an employee.

    Keys may be given in camelCase (``firstName``) as stored on disk, or by
    attribute name (``first_name``).
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    employee_id: Optional[str] = Field(None, max_length=64)
    employee_code: str = Field("", max_length=64)
    first_name: str = Field(..., min_length=1, max_length=64)
    last_name: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=1, max_length=254)
    # Kept verbatim so the phone check sees surrounding whitespace.
    phone: Annotated[str, StringConstraints(strip_whitespace=False, min_length=1, max_length=32)]
    department: str = Field(..., min_length=1, max_length=64)
    position: str = Field("", max_length=128)
    salary: float = Field(..., ge=0, description="Annual salary in USD")
    date_of_joining: date = Field(...)


class EmployeeRecord(EmployeeInput):
    """An employee as held by the store and written to storage.

    Records are immutable; the store replaces a record to change it.
    """

    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., min_length=1, max_length=64)
    date_added: str = Field(default_factory=utc_timestamp)

    @classmethod
    def from_input(cls, payload: EmployeeInput, *, employee_id: str, date_added: Optional[str] = None) -> "EmployeeRecord":
        data = payload.model_dump(exclude={"employee_id", "date_added"})
        data["employee_id"] = employee_id
        if date_added is not None:
            data["date_added"] = date_added
        return cls.model_validate(data)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def formatted_salary(self) -> str:
        return f"${self.salary:,.2f}"

    @property
    def formatted_joining_date(self) -> str:
        joined = self.date_of_joining
        return f"{joined.month}/{joined.day}/{joined.year}"

    def to_storage(self) -> Dict[str, Any]:
        """Serialize with camelCase keys and ISO dates."""
        return self.model_dump(mode="json", by_alias=True)

    def csv_fields(self) -> Tuple[str, ...]:
        return (
            self.employee_id,
            self.employee_code,
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
            self.department,
            self.position,
            format_plain_number(self.salary),
            self.date_of_joining.isoformat(),
        )


__all__ = [
    "EmployeeInput",
    "EmployeeRecord",
    "ValidationError",
    "format_plain_number",
    "generate_employee_id",
    "utc_timestamp",
]
