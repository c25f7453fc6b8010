# src/memo_todo/tasks/task_manager.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from .task_history import HistoryLog
from .task_models import HistoryOutcome, Task, TaskFilter, TaskSnapshot

logger = logging.getLogger(__name__)


class TaskManager:
    """
    In-memory task list with linear undo/redo.

    Tasks are addressed by their 0-based position; deleting a task shifts every
    later task down by one. Out-of-range indices are silent no-ops.

    History model:
    - every fresh mutation (add / complete / pending / delete) pushes a snapshot
      onto the undo log and clears the redo log;
    - undo()/redo() move one entry between the logs and restore the FIRST task
      whose current description equals the snapshot's description.
      Matching is by description, not by position, so duplicate descriptions
      resolve to the earliest task.

    Thread-safety:
    - all public methods run under one re-entrant lock; undo/redo pop, scan and
      restore as a single step.
    """

    def __init__(self, *, history_limit: int | None = None) -> None:
        self._tasks: list[Task] = []
        self._undo_log = HistoryLog("undo", max_entries=history_limit)
        self._redo_log = HistoryLog("redo", max_entries=history_limit)
        self._lock = threading.RLock()

    # ---- read access ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        with self._lock:
            return tuple(self._tasks)

    @property
    def undo_log(self) -> HistoryLog:
        return self._undo_log

    @property
    def redo_log(self) -> HistoryLog:
        return self._redo_log

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_task(self, index: int) -> Task | None:
        with self._lock:
            if not self._in_range(index):
                return None
            return self._tasks[index]

    def can_undo(self) -> bool:
        with self._lock:
            return not self._undo_log.is_empty()

    def can_redo(self) -> bool:
        with self._lock:
            return not self._redo_log.is_empty()

    # ---- helpers ----

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def _record(self, snapshot: TaskSnapshot) -> None:
        """Push onto the undo log; any fresh mutation invalidates the redo chain."""
        self._undo_log.push(snapshot)
        self._redo_log.clear()

    def _find_by_description(self, description: str) -> Task | None:
        for task in self._tasks:
            if task.description == description:
                return task
        return None

    def _replay(self, source: HistoryLog, target: HistoryLog) -> TaskSnapshot:
        """
        Pop from source, restore the first task matching by description, and push
        the state it displaced onto target.

        With no matching task the popped snapshot itself moves to target.
        """
        snapshot = source.pop()
        task = self._find_by_description(snapshot.description)
        if task is None:
            logger.debug("%s: no task matches description=%r", source.name, snapshot.description)
            target.push(snapshot)
            return snapshot

        target.push(task.save())
        task.restore(snapshot)
        return snapshot

    # ---- mutations ----

    def add_task(
        self,
        task: Task | str,
        due_date: str | None = "",
        tags: Iterable[str] | None = None,
    ) -> Task:
        """
        Append a task. Accepts a built Task or a description (+ optional due date/tags).

        The undo log receives a snapshot of the new task itself.
        """
        if not isinstance(task, Task):
            task = Task.builder(task).set_due_date(due_date).set_tags(tags).build()

        with self._lock:
            self._tasks.append(task)
            self._record(task.save())
            logger.debug(
                "Task added index=%s description=%r due=%r",
                len(self._tasks) - 1,
                task.description,
                task.due_date,
            )
        return task

    def mark_task_completed(self, index: int) -> None:
        with self._lock:
            if not self._in_range(index):
                logger.debug("mark_task_completed: index %s out of range (count=%s)", index, len(self._tasks))
                return
            task = self._tasks[index]
            if task.is_completed():
                return
            self._record(task.save())
            task.mark_completed()
            logger.debug("Task %s -> completed", index)

    def mark_task_pending(self, index: int) -> None:
        with self._lock:
            if not self._in_range(index):
                logger.debug("mark_task_pending: index %s out of range (count=%s)", index, len(self._tasks))
                return
            task = self._tasks[index]
            if not task.is_completed():
                return
            self._record(task.save())
            task.mark_pending()
            logger.debug("Task %s -> pending", index)

    def delete_task(self, index: int) -> None:
        with self._lock:
            if not self._in_range(index):
                logger.debug("delete_task: index %s out of range (count=%s)", index, len(self._tasks))
                return
            task = self._tasks[index]
            self._record(task.save())
            del self._tasks[index]
            logger.debug("Task deleted index=%s description=%r", index, task.description)

    # ---- queries ----

    def view_tasks(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> list[str]:
        """
        Rendered lines for tasks matching the filter, in list order.

        The index in each line is the task's position in the full list, not in the
        filtered result. An unknown filter string matches nothing.
        """
        with self._lock:
            lines: list[str] = []
            for i, task in enumerate(self._tasks):
                if (
                    task_filter == TaskFilter.ALL
                    or (task_filter == TaskFilter.COMPLETED and task.is_completed())
                    or (task_filter == TaskFilter.PENDING and not task.is_completed())
                ):
                    lines.append(task.display(i))
            return lines

    # ---- history ----

    def undo(self) -> HistoryOutcome:
        with self._lock:
            if self._undo_log.is_empty():
                logger.debug("undo: nothing to undo")
                return HistoryOutcome.NOTHING_TO_UNDO
            snapshot = self._replay(self._undo_log, self._redo_log)
            logger.debug("undo applied description=%r completed=%s", snapshot.description, snapshot.completed)
            return HistoryOutcome.UNDONE

    def redo(self) -> HistoryOutcome:
        with self._lock:
            if self._redo_log.is_empty():
                logger.debug("redo: nothing to redo")
                return HistoryOutcome.NOTHING_TO_REDO
            snapshot = self._replay(self._redo_log, self._undo_log)
            logger.debug("redo applied description=%r completed=%s", snapshot.description, snapshot.completed)
            return HistoryOutcome.REDONE
