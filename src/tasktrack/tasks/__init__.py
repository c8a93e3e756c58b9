"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskFilter)
- task_store.py: SQLite-backed storage, every query scoped by owner
- task_service.py: owner-scoped operations used by the rest of the app
"""
