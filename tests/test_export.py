import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
from employee_registry.export import ExportError, default_export_filename, export_csv, write_csv  # noqa: E402

HEADER = "Employee ID,Employee Code,First Name,Last Name,Email,Phone,Department,Position,Salary,Date of Joining"


def test_export_csv_layout(store, payload_factory):
    store.add(payload_factory())
    store.add(
        payload_factory(
            employeeId="EMP002",
            employeeCode="",
            firstName="Ann",
            lastName="Lee",
            email="ann@company.com",
            phone="5559876543",
            department="IT",
            position="Engineer",
            salary="81250.5",
            dateOfJoining="2024-07-01",
        )
    )

    lines = export_csv(store.all()).splitlines()

    assert lines == [
        HEADER,
        "EMP001,EC001,Jane,Smith,jane.smith@company.com,(555) 123-4567,HR,HR Manager,65000,2023-02-20",
        "EMP002,,Ann,Lee,ann@company.com,5559876543,IT,Engineer,81250.5,2024-07-01",
    ]


def test_export_csv_quotes_embedded_commas(store, payload_factory):
    store.add(payload_factory(position='Manager, "Payroll"'))

    row = export_csv(store.all()).splitlines()[1]

    assert row.endswith(',"Manager, ""Payroll""",65000,2023-02-20')


def test_export_csv_requires_records():
    with pytest.raises(ExportError, match="No employees to export!"):
        export_csv([])


def test_write_csv(tmp_path, store, payload_factory):
    store.add(payload_factory())
    output = write_csv(store.all(), tmp_path / "out" / "employees.csv")

    assert output.read_text(encoding="utf-8").splitlines()[0] == HEADER


def test_default_export_filename():
    assert default_export_filename(date(2026, 10, 19)) == "employees_2026-10-19.csv"
