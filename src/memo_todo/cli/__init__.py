"""
Command-line layer.

Components:
- bootstrap.py: composition root (settings -> AppState)
- commands.py: slash-command registry
- main.py: entrypoint (`memo-todo`)
"""
