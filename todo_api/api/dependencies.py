"""API dependencies for todo management."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from todo_api.repositories.base import TodoRepository
from todo_api.repositories.dynamodb import DynamoDBTodoRepository
from todo_api.repositories.memory import InMemoryTodoRepository
from todo_api.services.todo_handler import TodoHandler
from todo_api.settings import Settings, get_settings


def build_repository(settings: Settings) -> TodoRepository:
    """Create the storage backend named by ``settings``."""
    if settings.storage_backend == "memory":
        return InMemoryTodoRepository()
    if settings.storage_backend == "dynamodb":
        return DynamoDBTodoRepository.from_settings(
            table_name=settings.table_name,
            region=settings.region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")


@lru_cache
def get_todo_repository() -> TodoRepository:
    """Dependency for getting the process-wide todo repository."""
    return build_repository(get_settings())


def get_todo_handler(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoHandler:
    """Dependency for getting a todo handler instance."""
    return TodoHandler(repository)
