"""Todo repository interface - the storage port consumed by the dispatcher."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from todo_api.models.todo import ToDo


class TodoRepository(ABC):
    """Persistence for ToDo entities.

    Every method raises ``StorageError`` when the backend fails. A lookup miss
    is not a failure: ``get`` returns ``None``.
    """

    @abstractmethod
    def get(self, todo_id: str) -> Optional[ToDo]:
        """Return the ToDo with ``todo_id`` or ``None``."""

    @abstractmethod
    def get_all(self) -> List[ToDo]:
        """Return every stored ToDo, in no particular order."""

    @abstractmethod
    def save(self, todo: ToDo) -> None:
        """Create or overwrite ``todo``.

        Assigns a fresh id into ``todo`` when it has none and always
        refreshes ``todo.mod_time``.
        """

    @abstractmethod
    def delete(self, todo_id: str) -> None:
        """Remove the ToDo with ``todo_id``; a missing id is not an error."""

    @staticmethod
    def stamp(todo: ToDo) -> None:
        """Assign an id if needed and set the modification time."""
        if not todo.id:
            todo.id = str(uuid.uuid4())
        todo.mod_time = datetime.now(timezone.utc)
