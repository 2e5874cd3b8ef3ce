"""A JSON array file shared by the JSON-backed repositories.

Every read-modify-write runs under a per-file lock, acquired with a
timeout so a stuck writer surfaces as StoreUnavailableError instead of
blocking the request forever. Writes go to a temporary file that then
replaces the original, so readers never see a half-written array.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from storefront.domain.exceptions import StoreUnavailableError

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = _locks[path] = threading.RLock()
        return lock


class JsonFile:

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file_path = file_path.resolve()
        self._timeout = timeout
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    def read(self) -> list[dict]:
        with self._locked():
            return self._load()

    @contextmanager
    def update(self) -> Iterator[list[dict]]:
        """Yield the records for in-place mutation; persist them on clean exit."""
        with self._locked():
            records = self._load()
            yield records
            self._persist(records)

    # --- Internal helpers -----------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._timeout):
            raise StoreUnavailableError(
                f"Timed out after {self._timeout}s waiting for {self._file_path.name}"
            )
        try:
            yield
        finally:
            self._lock.release()

    def _load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        with self._locked():
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
