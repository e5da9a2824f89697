import sys
import time
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
from employee_registry.autosave import AutoSaver  # noqa: E402
from employee_registry.storage import MemoryStorage, PersistenceError  # noqa: E402
from employee_registry.store import EmployeeStore  # noqa: E402


class CountingStorage(MemoryStorage):
    def __init__(self, error=None):
        super().__init__()
        self.writes = 0
        self.error = error

    def set_item(self, key, value):
        self.writes += 1
        if self.error is not None:
            raise self.error
        super().set_item(key, value)


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


def test_autosaver_saves_periodically(payload_factory):
    storage = CountingStorage()
    store = EmployeeStore(storage)
    store.add(payload_factory())
    writes_after_add = storage.writes

    with AutoSaver(store, interval=0.02) as saver:
        assert saver.running
        assert _wait_for(lambda: saver.saves >= 2)

    assert not saver.running
    assert storage.writes >= writes_after_add + 2
    assert '"EMP001"' in storage.get_item("employees")


def test_autosaver_keeps_running_after_failure():
    storage = CountingStorage(error=PersistenceError("disk full"))
    store = EmployeeStore(storage)
    saver = AutoSaver(store, interval=0.02).start()
    try:
        assert _wait_for(lambda: storage.writes >= 2)
        assert saver.running
        assert saver.saves == 0
    finally:
        saver.stop()


def test_autosaver_stop_is_idempotent(store):
    saver = AutoSaver(store, interval=60)
    saver.stop()
    saver.start()
    saver.start()
    saver.stop()
    saver.stop()
    assert not saver.running


def test_autosaver_requires_positive_interval(store):
    with pytest.raises(ValueError):
        AutoSaver(store, interval=0)


def test_autosaver_survives_unexpected_storage_errors(payload_factory):
    storage = CountingStorage()
    store = EmployeeStore(storage)
    store.add(payload_factory())
    storage.error = OSError("read-only file system")
    writes_before = storage.writes

    saver = AutoSaver(store, interval=0.02).start()
    try:
        assert _wait_for(lambda: storage.writes >= writes_before + 2)
        assert saver.running
        assert saver.saves == 0
    finally:
        saver.stop()
    assert len(store) == 1
