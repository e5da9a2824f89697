"""Streamlit page for managing employee records.

The page provides:
- A form for adding employees, with an auto-generated employee id.
- A searchable, department-filterable table of the registry.
- An edit form and a confirmed delete for the selected employee.
- A CSV download of the whole registry.

Run with ``streamlit run src/employee_registry/gui_app.py``.
"""

from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

try:
    from .autosave import AutoSaver
    from .config import load_registry_config
    from .export import default_export_filename, export_csv
    from .logging_utils import configure_logging, get_logger
    from .presentation import (
        ALL_DEPARTMENTS,
        Notice,
        department_options,
        form_defaults,
        records_table,
        run_store_action,
    )
    from .registry_cli import open_store
    from .sample_data import SAMPLE_EMPLOYEES
    from .storage import PersistenceError
    from .store import EmployeeStore
except ImportError:  # pragma: no cover - fallback for script execution
    from employee_registry.autosave import AutoSaver
    from employee_registry.config import load_registry_config
    from employee_registry.export import default_export_filename, export_csv
    from employee_registry.logging_utils import configure_logging, get_logger
    from employee_registry.presentation import (
        ALL_DEPARTMENTS,
        Notice,
        department_options,
        form_defaults,
        records_table,
        run_store_action,
    )
    from employee_registry.registry_cli import open_store
    from employee_registry.sample_data import SAMPLE_EMPLOYEES
    from employee_registry.storage import PersistenceError
    from employee_registry.store import EmployeeStore

config = load_registry_config()
configure_logging(config.log_level)
logger = get_logger(__name__)

st.set_page_config(page_title="Employee Management System", layout="wide")
st.title("Employee Management System")

for key, default in (("form_errors", {}), ("notice", None), ("editing_employee_id", None)):
    if key not in st.session_state:
        st.session_state[key] = default


@st.cache_resource(show_spinner="Loading employees...")
def load_store() -> EmployeeStore:
    store = open_store(config)
    AutoSaver(store, config.autosave_interval).start()
    return store


def _notify(kind: str, message: str) -> None:
    st.session_state["notice"] = (kind, message)


def _apply(notice: Notice) -> bool:
    _notify(notice.kind, notice.message)
    st.session_state["form_errors"] = notice.field_errors
    return notice.ok


def _render_employee_fields(prefix: str, values: Dict[str, Any], *, id_locked: bool) -> Dict[str, Any]:
    errors = st.session_state.get("form_errors", {})
    record: Dict[str, Any] = {}
    left, right = st.columns(2)
    with left:
        record["employeeId"] = st.text_input("Employee ID", value=values["employeeId"], disabled=id_locked, key=f"{prefix}_id")
        record["firstName"] = st.text_input("First name", value=values["firstName"], key=f"{prefix}_first")
        record["email"] = st.text_input("Email", value=values["email"], key=f"{prefix}_email")
        options = department_options(config.departments, values["department"])
        index = options.index(values["department"]) if values["department"] in options else 0
        record["department"] = st.selectbox("Department", options=options, index=index, key=f"{prefix}_department")
        record["salary"] = st.number_input(
            "Salary", min_value=0.0, value=float(values["salary"]), step=1000.0, key=f"{prefix}_salary"
        )
    with right:
        record["employeeCode"] = st.text_input("Employee code", value=values["employeeCode"], key=f"{prefix}_code")
        record["lastName"] = st.text_input("Last name", value=values["lastName"], key=f"{prefix}_last")
        record["phone"] = st.text_input(
            "Phone", value=values["phone"], help="e.g. (555) 123-4567, 555-123-4567 or 5551234567", key=f"{prefix}_phone"
        )
        record["position"] = st.text_input("Position", value=values["position"], key=f"{prefix}_position")
        joined = st.date_input("Date of joining", value=values["dateOfJoining"], key=f"{prefix}_joined")
        record["dateOfJoining"] = joined.isoformat()

    for field, messages in errors.items():
        for message in messages:
            st.caption(f"⚠️ {field}: {message}")
    return record


store = load_store()

# --- Sidebar ---
with st.sidebar:
    st.header("Registry")
    st.metric("Total employees", len(store))
    st.caption(f"Saved to {config.storage.path} and every {config.autosave_interval:g} seconds.")
    if st.button("Add sample data"):
        try:
            added = sum(store.add(payload).ok for payload in SAMPLE_EMPLOYEES)
        except PersistenceError as err:
            logger.exception("Could not persist sample employees")
            _notify("error", f"Could not save employees: {err}")
        else:
            _notify("success", f"Sample data added successfully! ({added} employees)")

notice = st.session_state.get("notice")
if notice:
    kind, message = notice
    (st.success if kind == "success" else st.error)(message)
    st.session_state["notice"] = None

add_tab, list_tab = st.tabs(["➕ Add employee", "📋 Employees"])

with add_tab:
    if "next_employee_id" not in st.session_state:
        st.session_state["next_employee_id"] = store.new_employee_id()
    with st.form("add_employee_form", clear_on_submit=False):
        values = form_defaults(None, employee_id=st.session_state["next_employee_id"], department=config.departments[0])
        new_record = _render_employee_fields("add", values, id_locked=False)
        submitted = st.form_submit_button("Add employee")

    if submitted:
        if _apply(run_store_action(lambda: store.add(new_record), "Employee added successfully!")):
            st.session_state["next_employee_id"] = store.new_employee_id()
        st.rerun()

with list_tab:
    search_column, department_column = st.columns([3, 1])
    search_term = search_column.text_input("Search", placeholder="ID, code, name, email, phone or position")
    department = department_column.selectbox("Department", options=[ALL_DEPARTMENTS, *config.departments])
    visible = store.filter(search_term, None if department == ALL_DEPARTMENTS else department)

    if visible:
        st.dataframe(records_table(visible), use_container_width=True, hide_index=True)
    else:
        st.info("No employees found.")
    st.caption(f"Showing {len(visible)} of {len(store)} employees")

    if len(store):
        st.download_button(
            "📥 Export to CSV",
            data=export_csv(store.all()).encode("utf-8"),
            file_name=default_export_filename(),
            mime="text/csv",
        )

    visible_ids: List[str] = [record.employee_id for record in visible]
    if visible_ids:
        st.divider()
        selected_id = st.selectbox("Select an employee to edit or delete", options=visible_ids)
        st.session_state["editing_employee_id"] = selected_id
        selected = store.find_by_id(selected_id)

        if selected is not None:
            with st.form("edit_employee_form"):
                edited = _render_employee_fields(f"edit_{selected_id}", form_defaults(selected), id_locked=True)
                saved = st.form_submit_button("Save changes")
            if saved:
                _apply(run_store_action(lambda: store.update(selected_id, edited), "Employee updated successfully!"))
                st.rerun()

            confirmed = st.checkbox("Yes, I want to delete this employee", key=f"confirm_delete_{selected_id}")
            if st.button("🗑️ Delete employee", disabled=not confirmed):
                _apply(run_store_action(lambda: store.remove(selected_id), "Employee deleted successfully!"))
                st.session_state["editing_employee_id"] = None
                st.rerun()
