"""
Admission Gate - Bounded Concurrency with Accounting.

A counting semaphore that limits how many screening tasks run at once
and keeps track of acquisitions, releases and the peak number of slots
held at the same time.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class AdmissionGate:
    """Counting semaphore with in-flight accounting."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._semaphore = threading.BoundedSemaphore(capacity)
        self._lock = threading.Lock()
        self._acquired = 0
        self._released = 0
        self._peak = 0

    def acquire(self) -> None:
        """Block until a slot is free, then take it."""
        self._semaphore.acquire()
        with self._lock:
            self._acquired += 1
            in_flight = self._acquired - self._released
            if in_flight > self._peak:
                self._peak = in_flight

    def release(self) -> None:
        """Return a slot taken by ``acquire``."""
        with self._lock:
            if self._released >= self._acquired:
                raise ValueError("release() called more times than acquire()")
            self._released += 1
        self._semaphore.release()

    @contextmanager
    def slot(self) -> Iterator[None]:
        self.acquire()
        try:
            yield
        finally:
            self.release()

    @property
    def acquired(self) -> int:
        with self._lock:
            return self._acquired

    @property
    def released(self) -> int:
        with self._lock:
            return self._released

    @property
    def in_flight(self) -> int:
        with self._lock:
            return self._acquired - self._released

    @property
    def peak_in_flight(self) -> int:
        with self._lock:
            return self._peak
