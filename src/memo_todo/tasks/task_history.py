# src/memo_todo/tasks/task_history.py

"""
LIFO log of task snapshots.

The same type backs both the undo log and the redo log. It knows nothing about
its sibling: clearing the redo log on a fresh mutation is the manager's job.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from .task_models import TaskSnapshot

logger = logging.getLogger(__name__)


class EmptyHistoryError(IndexError):
    """pop() on a log with no entries. Callers are expected to check is_empty() first."""


class HistoryLog:
    """
    Stack of TaskSnapshot objects.

    max_entries:
    - None or 0: unbounded
    - N > 0: keep at most N entries, dropping the oldest on overflow
    """

    def __init__(self, name: str = "history", *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self.name = name
        self._max_entries = max_entries or None
        self._entries: deque[TaskSnapshot] = deque()

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def push(self, snapshot: TaskSnapshot) -> None:
        self._entries.append(snapshot)
        if self._max_entries is not None and len(self._entries) > self._max_entries:
            dropped = self._entries.popleft()
            logger.debug("%s log full (max=%s); dropped oldest %r", self.name, self._max_entries, dropped)

    def pop(self) -> TaskSnapshot:
        if not self._entries:
            raise EmptyHistoryError(f"{self.name} log is empty")
        return self._entries.pop()

    def peek(self) -> TaskSnapshot | None:
        return self._entries[-1] if self._entries else None

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TaskSnapshot]:
        # oldest -> newest
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"HistoryLog(name={self.name!r}, size={len(self._entries)}, max_entries={self._max_entries})"
