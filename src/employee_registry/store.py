"""The ordered, uniquely keyed collection of employee records.

:class:`EmployeeStore` owns the in-memory list and writes it through to a
key-value storage backend after every successful mutation. Business-rule
failures are returned as :class:`RejectionReason` values inside a
:class:`StoreResult`; they are never raised.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Union

from .constants import EMPLOYEE_ID_PREFIX, STORAGE_KEY
from .logging_utils import get_logger
from .query import filter_records
from .schemas import EmployeeInput, EmployeeRecord, ValidationError, generate_employee_id
from .storage import KeyValueStorage, PersistenceError
from .validators import is_email_taken, is_id_taken, validate_phone

logger = get_logger(__name__)

EmployeePayload = Union[EmployeeInput, Mapping[str, Any]]

_MAX_ID_ATTEMPTS = 100


class RejectionReason(str, Enum):
    DUPLICATE_ID = "duplicate_id"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_PHONE = "invalid_phone"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES = {
    RejectionReason.DUPLICATE_ID: "Employee ID already exists!",
    RejectionReason.DUPLICATE_EMAIL: "Email already exists!",
    RejectionReason.INVALID_PHONE: (
        "Please enter a valid US phone number (e.g., (555) 123-4567, 555-123-4567, or 5551234567)"
    ),
    RejectionReason.NOT_FOUND: "Employee not found!",
}


@dataclass(frozen=True)
class StoreResult:
    """Outcome of an add or update.

    Exactly one of ``record`` and ``reason`` is set.
    """

    record: Optional[EmployeeRecord] = None
    reason: Optional[RejectionReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def _coerce_input(data: EmployeePayload) -> EmployeeInput:
    if isinstance(data, EmployeeInput):
        return data
    return EmployeeInput.model_validate(data)


class EmployeeStore:
    """In-memory employee list with write-through persistence.

    Parameters
    ----------
    storage:
        Backend implementing ``get_item``/``set_item``.
    key:
        Name of the storage entry holding the JSON array of employees.
    id_prefix:
        Prefix for generated employee identifiers.
    load:
        Read the persisted records immediately.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        id_prefix: str = EMPLOYEE_ID_PREFIX,
        load: bool = True,
    ) -> None:
        self.storage = storage
        self.key = key
        self.id_prefix = id_prefix
        self._records: List[EmployeeRecord] = []
        # Re-entrant so mutations can call save() while holding it; the autosaver takes it too.
        self._lock = threading.RLock()
        if load:
            self.load()

    def __len__(self) -> int:
        return len(self._records)

    # --- validation helpers -------------------------------------------------

    def is_id_taken(self, employee_id: str) -> bool:
        return is_id_taken(self._records, employee_id)

    def is_email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return is_email_taken(self._records, email, exclude_id)

    def new_employee_id(self) -> str:
        """Generate an identifier not used by any current record."""
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = generate_employee_id(self.id_prefix)
            if not self.is_id_taken(candidate):
                return candidate
        raise RuntimeError(f"Could not generate a free employee id after {_MAX_ID_ATTEMPTS} attempts")

    def _index_of(self, employee_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.employee_id == employee_id:
                return index
        return None

    # --- mutations ----------------------------------------------------------

    def add(self, data: EmployeePayload) -> StoreResult:
        """Validate and append a new employee.

        Raises
        ------
        ValidationError:
            If ``data`` is a mapping that does not describe an employee.
        PersistenceError:
            If the record was accepted but could not be written to storage.
        """
        payload = _coerce_input(data)
        with self._lock:
            employee_id = payload.employee_id or self.new_employee_id()
            if self.is_id_taken(employee_id):
                return self._reject(RejectionReason.DUPLICATE_ID, "add", employee_id)
            if self.is_email_taken(payload.email):
                return self._reject(RejectionReason.DUPLICATE_EMAIL, "add", employee_id)
            if not validate_phone(payload.phone):
                return self._reject(RejectionReason.INVALID_PHONE, "add", employee_id)

            record = EmployeeRecord.from_input(payload, employee_id=employee_id)
            self._records.append(record)
            logger.info("Added employee %s (%s)", record.employee_id, record.full_name)
            self.save()
        return StoreResult(record=record)

    def update(self, employee_id: str, data: EmployeePayload) -> StoreResult:
        """Replace every field of an existing employee except its id and ``dateAdded``."""
        payload = _coerce_input(data)
        with self._lock:
            index = self._index_of(employee_id)
            if index is None:
                return self._reject(RejectionReason.NOT_FOUND, "update", employee_id)
            if self.is_email_taken(payload.email, exclude_id=employee_id):
                return self._reject(RejectionReason.DUPLICATE_EMAIL, "update", employee_id)
            if not validate_phone(payload.phone):
                return self._reject(RejectionReason.INVALID_PHONE, "update", employee_id)

            original = self._records[index]
            record = EmployeeRecord.from_input(payload, employee_id=employee_id, date_added=original.date_added)
            self._records[index] = record
            logger.info("Updated employee %s", employee_id)
            self.save()
        return StoreResult(record=record)

    def remove(self, employee_id: str) -> bool:
        with self._lock:
            index = self._index_of(employee_id)
            if index is None:
                logger.debug("Nothing to remove for employee %s", employee_id)
                return False
            del self._records[index]
            logger.info("Removed employee %s", employee_id)
            self.save()
        return True

    def _reject(self, reason: RejectionReason, operation: str, employee_id: str) -> StoreResult:
        logger.warning("Rejected %s for employee %s: %s", operation, employee_id, reason.value)
        return StoreResult(reason=reason)

    # --- queries ------------------------------------------------------------

    def find_by_id(self, employee_id: str) -> Optional[EmployeeRecord]:
        index = self._index_of(employee_id)
        return None if index is None else self._records[index]

    def all(self) -> Tuple[EmployeeRecord, ...]:
        return tuple(self._records)

    def filter(self, search_term: str = "", department: Optional[str] = None) -> List[EmployeeRecord]:
        return filter_records(self.all(), search_term, department)

    # --- persistence --------------------------------------------------------

    def save(self) -> None:
        """Write the whole ordered list to storage as a JSON array."""
        with self._lock:
            payload = json.dumps([record.to_storage() for record in self._records])
            self.storage.set_item(self.key, payload)
            logger.debug("Saved %d employees under '%s'", len(self._records), self.key)

    def load(self) -> None:
        """Replace the in-memory list with the persisted one.

        Records missing optional fields get their defaults. Entries that do
        not validate, or that repeat an id already loaded, are skipped with a
        warning.
        """
        raw = self.storage.get_item(self.key)
        if raw is None:
            entries: List[Any] = []
        else:
            try:
                entries = json.loads(raw)
            except ValueError as exc:
                raise PersistenceError(f"Storage entry '{self.key}' is not valid JSON: {exc}") from exc
            if not isinstance(entries, list):
                raise PersistenceError(f"Storage entry '{self.key}' does not hold a JSON array")

        records: List[EmployeeRecord] = []
        seen_ids = set()
        for position, entry in enumerate(entries, start=1):
            try:
                record = EmployeeRecord.model_validate(entry)
            except ValidationError as err:
                logger.warning("Skipping stored employee %d: %s", position, err)
                continue
            if record.employee_id in seen_ids:
                logger.warning("Skipping stored employee %d: duplicate id %s", position, record.employee_id)
                continue
            seen_ids.add(record.employee_id)
            records.append(record)

        with self._lock:
            self._records = records
        logger.info("Loaded %d employees from '%s'", len(records), self.key)


__all__ = ["EmployeePayload", "EmployeeStore", "RejectionReason", "StoreResult"]
