"""Storage port and its implementations."""

from .base import TodoRepository
from .dynamodb import DynamoDBTodoRepository
from .memory import InMemoryTodoRepository

__all__ = ["DynamoDBTodoRepository", "InMemoryTodoRepository", "TodoRepository"]
