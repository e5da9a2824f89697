"""Free-text and department filtering over employee records."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .schemas import EmployeeRecord


def matches_search(record: EmployeeRecord, search_term: str) -> bool:
    """Return True if ``search_term`` appears in one of the searchable fields.

    Text fields are compared case-insensitively; the phone number is compared
    verbatim.
    """
    needle = search_term.lower()
    text_fields = (
        record.employee_id,
        record.employee_code,
        record.full_name,
        record.email,
        record.position,
    )
    if any(needle in field.lower() for field in text_fields):
        return True
    return search_term in record.phone


def filter_records(
    records: Iterable[EmployeeRecord], search_term: str = "", department: Optional[str] = None
) -> List[EmployeeRecord]:
    """Return the records matching both criteria, in their original order.

    An empty ``search_term`` or ``department`` places no restriction.
    Whitespace around the search term is kept; callers strip it if they want.
    """
    selected = list(records)
    if search_term:
        selected = [record for record in selected if matches_search(record, search_term)]
    if department:
        selected = [record for record in selected if record.department == department]
    return selected


__all__ = ["filter_records", "matches_search"]
