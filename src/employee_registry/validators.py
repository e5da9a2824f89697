"""Business-rule checks applied before the store accepts a record.

All checks return booleans and never raise; the store turns a failed check
into a :class:`~employee_registry.store.RejectionReason`.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from .schemas import EmployeeRecord

_NON_DIGIT = re.compile(r"\D", re.ASCII)

# Accepted surface formats, checked against the raw (unstripped of punctuation) input.
PHONE_PATTERNS: Sequence[re.Pattern] = tuple(
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"\(\d{3}\) \d{3}-\d{4}",  # (555) 123-4567
        r"\d{3}-\d{3}-\d{4}",  # 555-123-4567
        r"\d{3}\.\d{3}\.\d{4}",  # 555.123.4567
        r"\d{3} \d{3} \d{4}",  # 555 123 4567
        r"\d{10}",  # 5551234567
        r"1-\d{3}-\d{3}-\d{4}",  # 1-555-123-4567
        r"\+1-\d{3}-\d{3}-\d{4}",  # +1-555-123-4567
        r"\+1 \(\d{3}\) \d{3}-\d{4}",  # +1 (555) 123-4567
        r"\+1 \d{3} \d{3} \d{4}",  # +1 555 123 4567
        r"1\d{10}",  # 15551234567
        r"\+1\d{10}",  # +15551234567
    )
)


def is_id_taken(records: Iterable[EmployeeRecord], employee_id: str) -> bool:
    return any(record.employee_id == employee_id for record in records)


def is_email_taken(records: Iterable[EmployeeRecord], email: str, exclude_id: Optional[str] = None) -> bool:
    """Return True if another record already uses ``email``.

    The record whose id equals ``exclude_id`` is ignored so an employee being
    edited can keep their own address.
    """
    return any(record.email == email and record.employee_id != exclude_id for record in records)


def _has_valid_digits(digits: str) -> bool:
    if len(digits) == 10:
        return digits[0] not in "01"
    if len(digits) == 11:
        return digits[0] == "1" and digits[1] not in "01"
    return False


def validate_phone(raw: str) -> bool:
    """Check a US phone number.

    The number must carry 10 digits with an area code not starting with 0 or
    1 (optionally preceded by the country code 1), and the raw text must be
    written in one of the :data:`PHONE_PATTERNS` formats. Both conditions are
    required.
    """
    if not isinstance(raw, str):
        return False
    digits = _NON_DIGIT.sub("", raw)
    if not _has_valid_digits(digits):
        return False
    return any(pattern.fullmatch(raw) for pattern in PHONE_PATTERNS)


__all__ = ["PHONE_PATTERNS", "is_email_taken", "is_id_taken", "validate_phone"]
