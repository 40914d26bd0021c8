"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStats)
- errors.py: exception hierarchy shared by the store and its callers
- timestamps.py: datetime <-> ISO-8601 codec used at load/export boundaries
- task_store.py: in-memory store + id allocation
- projection.py: display-ready view derived from the store
- serialization.py: export document / source document parsing
- loader.py: async load of the source document into the store
- confirmations.py: two-phase confirm protocol for destructive operations
- task_api.py: small high-level helpers used by the rest of the app
"""
