"""Request handling services."""

from .todo_handler import TodoHandler

__all__ = ["TodoHandler"]
