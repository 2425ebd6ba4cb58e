"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file storage with load/save and per-command helpers
"""
