# src/memo_todo/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum


class TaskFilter(StrEnum):
    """
    Listing filters accepted by TaskManager.view_tasks().

    Values are the labels used by the menu ("Show all", ...). Any other string is
    passed through unvalidated and simply matches no task.
    """

    ALL = "Show all"
    COMPLETED = "Show completed"
    PENDING = "Show pending"

    @classmethod
    def from_arg(cls, raw: str | None) -> TaskFilter | None:
        """Map a short CLI word (all/completed/pending/done/...) to a filter."""
        if not raw:
            return cls.ALL
        key = raw.strip().lower()
        for member in cls:
            if key == member.value.lower():
                return member
        return _FILTER_ALIASES.get(key)


_FILTER_ALIASES: dict[str, TaskFilter] = {
    "all": TaskFilter.ALL,
    "a": TaskFilter.ALL,
    "completed": TaskFilter.COMPLETED,
    "done": TaskFilter.COMPLETED,
    "c": TaskFilter.COMPLETED,
    "pending": TaskFilter.PENDING,
    "todo": TaskFilter.PENDING,
    "p": TaskFilter.PENDING,
}


class HistoryOutcome(StrEnum):
    """Result of an undo()/redo() call."""

    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"
    REDONE = "redone"
    NOTHING_TO_REDO = "nothing_to_redo"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]

    @property
    def applied(self) -> bool:
        return self in (HistoryOutcome.UNDONE, HistoryOutcome.REDONE)


_OUTCOME_MESSAGES: dict[HistoryOutcome, str] = {
    HistoryOutcome.UNDONE: "Undo successful.",
    HistoryOutcome.NOTHING_TO_UNDO: "Nothing to undo.",
    HistoryOutcome.REDONE: "Redo successful.",
    HistoryOutcome.NOTHING_TO_REDO: "Nothing to redo.",
}


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
    """
    Immutable capture of a task at one moment (memento).

    Tags are deliberately not part of the snapshot: restore() leaves them alone.
    """

    description: str
    completed: bool
    due_date: str = ""


@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    Build through Task.builder(...) so a task always starts out pending.
    An empty due_date means "no due date".
    """

    description: str
    completed: bool = False
    due_date: str = ""
    tags: list[str] = field(default_factory=list)

    @staticmethod
    def builder(description: str) -> TaskBuilder:
        return TaskBuilder(description)

    def is_completed(self) -> bool:
        return self.completed

    def mark_completed(self) -> None:
        if not self.completed:
            self.completed = True

    def mark_pending(self) -> None:
        if self.completed:
            self.completed = False

    def save(self) -> TaskSnapshot:
        return TaskSnapshot(
            description=self.description,
            completed=self.completed,
            due_date=self.due_date,
        )

    def restore(self, snapshot: TaskSnapshot) -> None:
        self.description = snapshot.description
        self.completed = snapshot.completed
        self.due_date = snapshot.due_date

    def display(self, index: int) -> str:
        """Render as '<index+1>. <description> - Completed|Pending[, Due: <date>]'."""
        line = f"{index + 1}. {self.description} - {'Completed' if self.completed else 'Pending'}"
        if self.due_date:
            line += f", Due: {self.due_date}"
        return line


class TaskBuilder:
    """Fluent builder: Task.builder("Pay bills").set_due_date("2024-05-01").build()."""

    def __init__(self, description: str) -> None:
        if not isinstance(description, str):
            raise TypeError(f"description must be str, got {type(description).__name__}")
        self._description = description
        self._due_date = ""
        self._tags: list[str] = []

    def set_due_date(self, due_date: str | None) -> TaskBuilder:
        self._due_date = due_date or ""
        return self

    def set_tags(self, tags: Iterable[str] | None) -> TaskBuilder:
        self._tags = list(tags or [])
        return self

    def build(self) -> Task:
        return Task(
            description=self._description,
            completed=False,
            due_date=self._due_date,
            tags=list(self._tags),
        )
