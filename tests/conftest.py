import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
from employee_registry.storage import MemoryStorage  # noqa: E402
from employee_registry.store import EmployeeStore  # noqa: E402


def valid_payload(**overrides):
    payload = {
        "employeeId": "EMP001",
        "employeeCode": "EC001",
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@company.com",
        "phone": "(555) 123-4567",
        "department": "HR",
        "position": "HR Manager",
        "salary": "65000",
        "dateOfJoining": "2023-02-20",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def payload_factory():
    return valid_payload


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return EmployeeStore(storage)
