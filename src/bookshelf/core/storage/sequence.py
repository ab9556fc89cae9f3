"""Monotonic identifier allocation for in-memory repositories."""

from __future__ import annotations

import threading


class IdSequence:
    """Thread-safe counter handing out string identifiers.

    Values are never reused, even when the record they were assigned to is
    deleted later on.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> str:
        """Consume and return the next identifier."""
        with self._lock:
            value = self._next
            self._next += 1
        return str(value)

    def peek(self) -> int:
        """Return the value the next call to ``next()`` will hand out."""
        with self._lock:
            return self._next
