"""
HyperSynergy — Reader-Writer Lock

Concurrent readers, exclusive writers, for synchronous (threaded) callers.

Writer preference: once a writer is waiting, new readers block until every
pending writer has been served, so read-heavy workloads (audits, metric
snapshots) cannot starve activity recording.

The lock is not reentrant. A thread holding the read side must not ask for
it again while a writer may be queued.

Usage::

    lock = ReadWriteLock("registry")

    with lock.read_lock():
        value = shared_state["key"]

    with lock.write_lock():
        shared_state["key"] = new_value
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class ReadWriteLock:
    """Threading-based reader-writer lock with writer preference."""

    def __init__(self, name: str = "") -> None:
        self._name = name or f"ReadWriteLock-{id(self):x}"
        self._cond = threading.Condition(threading.Lock())

        self._readers: int = 0
        self._writer_active: bool = False
        self._writers_waiting: int = 0

        # Metrics
        self._total_reads: int = 0
        self._total_writes: int = 0

    @property
    def name(self) -> str:
        return self._name

    # ─── Shared ──────────────────────────────────────────────────────

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer_active or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1
            self._total_reads += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError(f"[{self._name}] release_read called with no active readers")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # ─── Exclusive ───────────────────────────────────────────────────

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers > 0:
                    self._cond.wait()
            except BaseException:
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True
            self._total_writes += 1

    def release_write(self) -> None:
        with self._cond:
            if not self._writer_active:
                raise RuntimeError(f"[{self._name}] release_write called with no active writer")
            self._writer_active = False
            self._cond.notify_all()

    # ─── Context managers ────────────────────────────────────────────

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    # ─── State ───────────────────────────────────────────────────────

    @property
    def stats(self) -> dict[str, Any]:
        with self._cond:
            return {
                "name": self._name,
                "readers": self._readers,
                "writer_active": self._writer_active,
                "writers_waiting": self._writers_waiting,
                "total_reads": self._total_reads,
                "total_writes": self._total_writes,
            }
