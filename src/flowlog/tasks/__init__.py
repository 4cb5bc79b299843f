"""
Task subsystem.

Components:
- task_models.py: TaskRecord and duration parsing
- task_store.py: ordered in-memory store with change notification
- suggestions.py: rule-based workflow advice
- task_export.py: CSV export
- task_api.py: small high-level helpers used by the rest of the app
"""
