"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, StorageError)
- task_store.py: SQLite-backed storage holding one connection for its lifetime
- memory_store.py: in-memory storage with the same four operations
- task_api.py: small helpers used by the command layer (validation, lookup)
"""
