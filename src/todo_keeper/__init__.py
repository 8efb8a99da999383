"""todo_keeper: a local todo list with confirm-gated deletes."""

__version__ = "0.1.0"
