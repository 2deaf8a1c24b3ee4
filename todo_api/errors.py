"""Error taxonomy shared by the dispatcher and the response builder."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from fastapi import status


class ErrorKind(Enum):
    """Closed set of error kinds, each with a default message and status code."""

    NOT_FOUND = ("not found", status.HTTP_404_NOT_FOUND)
    BAD_REQUEST = ("bad request", status.HTTP_400_BAD_REQUEST)
    METHOD_NOT_ALLOWED = ("method not allowed", status.HTTP_405_METHOD_NOT_ALLOWED)
    # Declared for completeness; the dispatcher never raises it.
    UNAUTHORIZED = ("unauthorized", status.HTTP_401_UNAUTHORIZED)
    INTERNAL = ("internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    def __init__(self, default_message: str, status_code: int) -> None:
        self.default_message = default_message
        self.status_code = status_code


class ApiError(Exception):
    """An error outcome of a request, matched by ``kind``."""

    def __init__(self, kind: ErrorKind, reason: Optional[str] = None) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.reason:
            return f"{self.reason}: {self.kind.default_message}"
        return self.kind.default_message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.name}, reason={self.reason!r})"


class StorageError(Exception):
    """Raised by any storage backend when an operation fails."""
