import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
from employee_registry.query import filter_records  # noqa: E402
from employee_registry.sample_data import SAMPLE_EMPLOYEES  # noqa: E402


@pytest.fixture
def seeded_store(store):
    for payload in SAMPLE_EMPLOYEES:
        assert store.add(payload).ok
    return store


def _ids(records):
    return [record.employee_id for record in records]


def test_empty_filter_is_identity(seeded_store):
    assert seeded_store.filter("") == list(seeded_store.all())
    assert filter_records(seeded_store.all()) == list(seeded_store.all())


def test_search_is_case_insensitive_on_names(seeded_store):
    assert _ids(seeded_store.filter("jane")) == ["EMP002"]
    assert _ids(seeded_store.filter("JANE")) == ["EMP002"]
    assert _ids(seeded_store.filter("jane smith")) == ["EMP002"]


def test_search_covers_id_code_email_and_position(seeded_store):
    assert _ids(seeded_store.filter("emp004")) == ["EMP004"]
    assert _ids(seeded_store.filter("ec005")) == ["EMP005"]
    assert _ids(seeded_store.filter("MIKE.JOHNSON@")) == ["EMP003"]
    assert _ids(seeded_store.filter("analyst")) == ["EMP003"]


def test_search_matches_phone_verbatim(seeded_store):
    assert _ids(seeded_store.filter("201-0125")) == ["EMP003"]
    assert _ids(seeded_store.filter("+1-555")) == ["EMP001", "EMP002", "EMP003", "EMP004", "EMP005"]


def test_search_does_not_look_at_department_or_salary(seeded_store):
    assert seeded_store.filter("finance") == []
    assert seeded_store.filter("55000") == []


def test_department_filter_is_exact_and_case_sensitive(seeded_store):
    assert _ids(seeded_store.filter(department="Sales")) == ["EMP005"]
    assert seeded_store.filter(department="sales") == []
    assert seeded_store.filter(department="Sale") == []


def test_filters_compose_with_and(seeded_store):
    assert _ids(seeded_store.filter("son", department="Finance")) == ["EMP003"]
    assert seeded_store.filter("jane", department="IT") == []
    assert _ids(seeded_store.filter("manager")) == ["EMP002"]


def test_filter_preserves_insertion_order_and_does_not_mutate(seeded_store):
    before = seeded_store.all()
    result = seeded_store.filter("o")
    assert _ids(result) == sorted(_ids(result), key=_ids(before).index)
    assert seeded_store.all() == before
