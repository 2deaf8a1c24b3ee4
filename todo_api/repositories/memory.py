"""In-memory todo repository."""

from __future__ import annotations

from typing import Dict, List, Optional

from todo_api.models.todo import ToDo
from todo_api.repositories.base import TodoRepository


class InMemoryTodoRepository(TodoRepository):
    """Repository for todo data access with in-memory storage."""

    def __init__(self) -> None:
        self._todos: Dict[str, ToDo] = {}

    def get(self, todo_id: str) -> Optional[ToDo]:
        """Get todo by ID."""
        todo = self._todos.get(todo_id)
        return todo.model_copy(deep=True) if todo else None

    def get_all(self) -> List[ToDo]:
        """Get all todos."""
        return [todo.model_copy(deep=True) for todo in self._todos.values()]

    def save(self, todo: ToDo) -> None:
        """Create or overwrite a todo."""
        self.stamp(todo)
        self._todos[todo.id] = todo.model_copy(deep=True)

    def delete(self, todo_id: str) -> None:
        """Delete a todo."""
        self._todos.pop(todo_id, None)

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        self._todos.clear()
