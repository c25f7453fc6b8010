"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskBuilder, TaskSnapshot, TaskFilter, HistoryOutcome)
- task_history.py: LIFO snapshot log used for both undo and redo
- task_manager.py: in-memory task list + undo/redo protocol
"""

from .task_history import EmptyHistoryError, HistoryLog
from .task_manager import TaskManager
from .task_models import HistoryOutcome, Task, TaskBuilder, TaskFilter, TaskSnapshot

__all__ = [
    "EmptyHistoryError",
    "HistoryLog",
    "HistoryOutcome",
    "Task",
    "TaskBuilder",
    "TaskFilter",
    "TaskManager",
    "TaskSnapshot",
]
