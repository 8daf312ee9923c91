"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskCategory, TaskStatus, TaskSortOrder)
- seed_data.py: demonstration tasks used on first run
- task_persistence.py: JSON document storage with seed fallback
- task_store.py: in-memory collection, mutations, queries, change notifications
- task_form.py: form-level validation and task construction
- insights.py: completion statistics
"""
