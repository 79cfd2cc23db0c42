"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStatus)
- errors.py: TaskError hierarchy shown to the user by the shell
- task_store.py: in-memory storage + query/update helpers
"""
