"""Data models for the ToDo service."""

from .todo import ToDo
from .wire import ApiRequest, ApiResponse

__all__ = ["ApiRequest", "ApiResponse", "ToDo"]
