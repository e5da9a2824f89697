"""Command-line interface for the employee registry.

Subcommands operate on the storage named in ``configs/registry.yaml`` (or the
file passed with ``--config``):

- ``list``: print employees, optionally narrowed by ``--search`` and
  ``--department``.
- ``show``: print every field of one employee.
- ``add``: create employees from a JSON file (one object or a list), or
  interactively when ``--employee-json`` is omitted. Defaults are suggested for
  each prompt and a fresh employee id is generated.
- ``update``: overwrite an employee with the fields found in a JSON file;
  fields missing from the file keep their current values.
- ``remove``: delete an employee after confirmation (``--yes`` skips it).
- ``export``: write the whole registry to CSV.
- ``seed``: add the demonstration employees.

Rejected operations (duplicate id or email, invalid phone, unknown id) print
the reason and make the command exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_CONFIG_PATH, RegistryConfig, load_registry_config
from .export import ExportError, default_export_filename, write_csv
from .logging_utils import configure_logging, get_logger
from .sample_data import SAMPLE_EMPLOYEES
from .schemas import EmployeeRecord, ValidationError
from .store import EmployeeStore, StoreResult

logger = get_logger(__name__)

# Default values for the interactive prompts. The id and joining date are filled in at runtime.
DEFAULT_PROMPTS: Dict[str, str] = {
    "employeeId": "",
    "employeeCode": "",
    "firstName": "",
    "lastName": "",
    "email": "",
    "phone": "",
    "department": "IT",
    "position": "",
    "salary": "50000",
    "dateOfJoining": "",
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the registry CLI."""
    parser = argparse.ArgumentParser(description="Manage employee records")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to registry.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List employees")
    list_parser.add_argument("--search", default="", help="Case-insensitive text to look for")
    list_parser.add_argument("--department", default="", help="Exact department name")

    show_parser = subparsers.add_parser("show", help="Show one employee")
    show_parser.add_argument("employee_id")

    add_parser = subparsers.add_parser("add", help="Add employees")
    add_parser.add_argument(
        "--employee-json",
        type=Path,
        help="Path to a JSON file with employee data. If omitted, prompts for interactive input.",
    )

    update_parser = subparsers.add_parser("update", help="Edit an employee")
    update_parser.add_argument("employee_id")
    update_parser.add_argument("--employee-json", type=Path, required=True, help="JSON object with new field values")

    remove_parser = subparsers.add_parser("remove", help="Delete an employee")
    remove_parser.add_argument("employee_id")
    remove_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    export_parser = subparsers.add_parser("export", help="Export employees to CSV")
    export_parser.add_argument("--output", type=Path, default=None, help="Destination file")

    subparsers.add_parser("seed", help="Add demonstration employees")
    return parser.parse_args(argv)


def _prompt_user(prompts: Dict[str, str]) -> Dict[str, str]:
    """Interactively prompt the user for employee details.

    Parameters
    ----------
    prompts:
        A dictionary mapping field names to their default string values.

    Returns
    -------
    A dictionary of the user's responses.
    """
    print("Enter employee information. Press Enter to accept the suggested default.")
    responses: Dict[str, str] = {}
    for field, default in prompts.items():
        raw_input = input(f"{field} [{default}]: ").strip()
        responses[field] = raw_input or default
        logger.debug("Captured input for '%s': '%s'", field, responses[field])
    return responses


def _load_employee_json(path: Path) -> List[Dict[str, Any]]:
    """Load employee payloads from a JSON file.

    A single object is wrapped in a list so callers can treat the result
    uniformly.

    Raises
    ------
    ValueError:
        If the JSON file contains an empty list.
    """
    logger.info("Loading employee data from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)

    if isinstance(data, list):
        if not data:
            raise ValueError(f"Employee JSON file is empty: {path}")
        return data
    return [data]


def open_store(config: RegistryConfig) -> EmployeeStore:
    return EmployeeStore(config.storage.open(), key=config.storage.key, id_prefix=config.id_prefix)


def display_records(records: Iterable[EmployeeRecord]) -> None:
    """Print a table of employees followed by the total count."""
    records = list(records)
    header = f"{'ID':<14}{'Code':<10}{'Name':<24}{'Email':<30}{'Phone':<20}{'Department':<12}{'Position':<24}{'Salary':>14}  {'Joined':<10}"
    print(header)
    print("-" * len(header))
    if not records:
        print("No employees found.")
    for record in records:
        print(
            f"{record.employee_id:<14}{record.employee_code:<10}{record.full_name:<24}{record.email:<30}"
            f"{record.phone:<20}{record.department:<12}{record.position:<24}{record.formatted_salary:>14}"
            f"  {record.formatted_joining_date:<10}"
        )
    print(f"\nTotal employees: {len(records)}")


def display_record(record: EmployeeRecord) -> None:
    for key, value in record.to_storage().items():
        print(f"{key:<15}{value}")


def _report(result: StoreResult, success_message: str) -> bool:
    if result.ok:
        print(f"{success_message} ({result.record.employee_id})")
        return True
    print(f"Error: {result.reason.message}")
    return False


def _display_validation_errors(error: ValidationError) -> None:
    print("\nInput validation failed:")
    for issue in error.errors():
        loc = " -> ".join(str(part) for part in issue.get("loc", [])) or "record"
        print(f" - {loc}: {issue.get('msg')}")


def _confirm(prompt: str) -> bool:
    return input(f"{prompt} [y/N]: ").strip().lower() in {"y", "yes"}


def run_command(args: argparse.Namespace, store: EmployeeStore) -> bool:
    """Execute one subcommand. Returns False when the operation was rejected."""
    if args.command == "list":
        display_records(store.filter(args.search.strip(), args.department.strip() or None))
        return True

    if args.command == "show":
        record = store.find_by_id(args.employee_id)
        if record is None:
            print(f"Error: no employee with id {args.employee_id}")
            return False
        display_record(record)
        return True

    if args.command == "add":
        if args.employee_json:
            payloads = _load_employee_json(args.employee_json)
        else:
            prompts = dict(DEFAULT_PROMPTS, employeeId=store.new_employee_id(), dateOfJoining=date.today().isoformat())
            payloads = [_prompt_user(prompts)]
        outcomes = [_report(store.add(payload), "Employee added successfully!") for payload in payloads]
        return all(outcomes)

    if args.command == "update":
        existing = store.find_by_id(args.employee_id)
        if existing is None:
            print(f"Error: no employee with id {args.employee_id}")
            return False
        changes = _load_employee_json(args.employee_json)[0]
        payload = {**existing.to_storage(), **changes}
        return _report(store.update(args.employee_id, payload), "Employee updated successfully!")

    if args.command == "remove":
        if not args.yes and not _confirm("Are you sure you want to delete this employee?"):
            print("Cancelled.")
            return True
        if store.remove(args.employee_id):
            print("Employee deleted successfully!")
            return True
        print(f"Error: no employee with id {args.employee_id}")
        return False

    if args.command == "export":
        output = args.output or Path(default_export_filename())
        try:
            write_csv(store.all(), output)
        except ExportError as err:
            print(f"Error: {err}")
            return False
        print(f"Employees exported successfully to {output}")
        return True

    if args.command == "seed":
        added = sum(store.add(payload).ok for payload in SAMPLE_EMPLOYEES)
        print(f"Sample data added: {added} of {len(SAMPLE_EMPLOYEES)} employees.")
        return True

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI application."""
    args = parse_args(argv)
    config = load_registry_config(args.config)
    configure_logging(config.log_level)

    try:
        store = open_store(config)
        succeeded = run_command(args, store)
    except ValidationError as err:
        _display_validation_errors(err)
        sys.exit(1)
    except Exception as e:
        logger.exception("The %s command failed.", args.command)
        print(f"\nError: {e}")
        sys.exit(1)

    if not succeeded:
        sys.exit(1)


if __name__ == "__main__":
    main()
