"""
Todo subsystem.

Components:
- todo_models.py: data structures (Todo) and wire helpers
- todo_store.py: load/save of the whole list against one storage slot
- delete_flow.py: confirm-gated delete (Idle / AwaitingConfirmation)
- todo_api.py: add / edit / toggle / list helpers used by the commands
"""
