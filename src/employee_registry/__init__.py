"""Employee record manager: validation, an ordered persistent store, search and CSV export."""

from .schemas import EmployeeInput, EmployeeRecord
from .storage import JsonFileStorage, MemoryStorage, PersistenceError
from .store import EmployeeStore, RejectionReason, StoreResult

__version__ = "0.1.0"

__all__ = [
    "EmployeeInput",
    "EmployeeRecord",
    "EmployeeStore",
    "JsonFileStorage",
    "MemoryStorage",
    "PersistenceError",
    "RejectionReason",
    "StoreResult",
]
