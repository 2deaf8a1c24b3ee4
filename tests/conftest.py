"""Shared fixtures and test doubles."""

import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.models.todo import ToDo  # noqa: E402
from todo_api.repositories.base import TodoRepository  # noqa: E402

TEST_UUID = "a8a43435-20d8-4af2-8f94-f504aff2c6f3"


def _unexpected(*_args):
    raise AssertionError("unexpected storage call")


class RecordingRepository(TodoRepository):
    """Repository double whose behavior is supplied per test.

    Records which operations were invoked so tests can assert that storage
    was or was not touched.
    """

    def __init__(
        self,
        get_fn: Callable[[str], Optional[ToDo]] = _unexpected,
        get_all_fn: Callable[[], List[ToDo]] = _unexpected,
        save_fn: Callable[[ToDo], None] = _unexpected,
        delete_fn: Callable[[str], None] = _unexpected,
    ) -> None:
        self.get_fn = get_fn
        self.get_all_fn = get_all_fn
        self.save_fn = save_fn
        self.delete_fn = delete_fn
        self.get_invoked = False
        self.get_all_invoked = False
        self.save_invoked = False
        self.delete_invoked = False

    @property
    def any_invoked(self) -> bool:
        return self.get_invoked or self.get_all_invoked or self.save_invoked or self.delete_invoked

    def get(self, todo_id: str) -> Optional[ToDo]:
        self.get_invoked = True
        return self.get_fn(todo_id)

    def get_all(self) -> List[ToDo]:
        self.get_all_invoked = True
        return self.get_all_fn()

    def save(self, todo: ToDo) -> None:
        self.save_invoked = True
        self.save_fn(todo)

    def delete(self, todo_id: str) -> None:
        self.delete_invoked = True
        self.delete_fn(todo_id)


@pytest.fixture
def new_todo() -> ToDo:
    """A ToDo that has not been stored yet."""
    return ToDo(title="Some ToDo")


@pytest.fixture
def saved_todo() -> ToDo:
    """A ToDo as it comes back from storage."""
    return ToDo(id=TEST_UUID, title="Some ToDo")
