"""memo-todo: in-memory task list with snapshot-based undo/redo."""

__version__ = "0.1.0"
