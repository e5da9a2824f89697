"""Periodic background persistence for an :class:`EmployeeStore`."""

from __future__ import annotations

import threading
from typing import Optional

from .constants import AUTOSAVE_INTERVAL_SECONDS
from .logging_utils import get_logger
from .store import EmployeeStore

logger = get_logger(__name__)


class AutoSaver:
    """Call ``store.save()`` every ``interval`` seconds on a daemon thread.

    Usable as a context manager. A failed save, whatever the backend raised,
    is logged and the next tick tries again.
    """

    def __init__(self, store: EmployeeStore, interval: float = AUTOSAVE_INTERVAL_SECONDS) -> None:
        if interval <= 0:
            raise ValueError("Autosave interval must be positive")
        self.store = store
        self.interval = interval
        self.saves = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "AutoSaver":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="employee-autosave", daemon=True)
        self._thread.start()
        logger.info("Autosave started (every %.1f s)", self.interval)
        return self

    def stop(self, timeout: Optional[float] = None) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("Autosave stopped after %d saves", self.saves)

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.store.save()
            except Exception:
                logger.exception("Autosave failed")
            else:
                self.saves += 1

    def __enter__(self) -> "AutoSaver":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()


__all__ = ["AutoSaver"]
