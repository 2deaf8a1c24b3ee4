"""Todo request dispatcher - routing, validation and storage orchestration."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from todo_api.api.responses import build_error_response, build_ok_response
from todo_api.errors import ApiError, ErrorKind, StorageError
from todo_api.models.todo import ToDo
from todo_api.models.wire import ApiRequest, ApiResponse
from todo_api.repositories.base import TodoRepository

logger = logging.getLogger(__name__)


class TodoHandler:
    """Handles ToDo requests against a storage repository.

    Update and delete confirm the ToDo exists before mutating it, so a missing
    id is always reported as 404 regardless of how the store treats writes to
    unknown keys.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> TodoRepository:
        return self._repository

    def handle(self, request: ApiRequest) -> ApiResponse:
        """Dispatch ``request`` by method and return the wire response."""
        method = request.method
        if method == "GET":
            return self._get(request)
        if method == "POST":
            return self._post(request)
        if method == "PUT":
            return self._put(request)
        if method == "DELETE":
            return self._delete(request)

        logger.info("Rejected unsupported method %s", method)
        return build_error_response(ApiError(ErrorKind.METHOD_NOT_ALLOWED))

    def _get(self, request: ApiRequest) -> ApiResponse:
        if request.path_identifier is not None:
            return self._get_one(request.path_identifier)
        return self._get_all()

    def _get_one(self, todo_id: str) -> ApiResponse:
        try:
            todo = self._repository.get(todo_id)
        except StorageError:
            logger.exception("Failed to fetch ToDo %s", todo_id)
            return _internal_error()

        if todo is None:
            return build_error_response(ApiError(ErrorKind.NOT_FOUND))
        return build_ok_response(todo)

    def _get_all(self) -> ApiResponse:
        try:
            todos = self._repository.get_all()
        except StorageError:
            logger.exception("Failed to fetch ToDos")
            return _internal_error()
        return build_ok_response(todos)

    def _post(self, request: ApiRequest) -> ApiResponse:
        try:
            todo = ToDo.parse(request.body)
        except ValidationError as exc:
            # Malformed bodies are reported as internal errors, not 400s.
            logger.warning("Could not parse ToDo body: %s", exc)
            return _internal_error()

        if todo.id:
            return _bad_request("ID must be empty")

        try:
            self._repository.save(todo)
        except StorageError:
            logger.exception("Failed to create ToDo")
            return _internal_error()

        logger.info("Created ToDo %s", todo.id)
        return build_ok_response(todo)

    def _put(self, request: ApiRequest) -> ApiResponse:
        todo_id = request.path_identifier
        if todo_id is None:
            return _bad_request("ID is required")

        try:
            todo = ToDo.parse(request.body)
        except ValidationError as exc:
            logger.warning("Could not parse ToDo body: %s", exc)
            return _internal_error()

        if todo_id != todo.id:
            return _bad_request("ID in body does not match ID in path")

        not_found = self._check_exists(todo_id)
        if not_found is not None:
            return not_found

        try:
            self._repository.save(todo)
        except StorageError:
            logger.exception("Failed to update ToDo %s", todo_id)
            return _internal_error()

        logger.info("Updated ToDo %s", todo_id)
        return build_ok_response(todo)

    def _delete(self, request: ApiRequest) -> ApiResponse:
        todo_id = request.path_identifier
        if todo_id is None:
            return _bad_request("ID is required")

        not_found = self._check_exists(todo_id)
        if not_found is not None:
            return not_found

        try:
            self._repository.delete(todo_id)
        except StorageError:
            logger.exception("Failed to delete ToDo %s", todo_id)
            return _internal_error()

        logger.info("Deleted ToDo %s", todo_id)
        return build_ok_response("")

    def _check_exists(self, todo_id: str) -> ApiResponse | None:
        """Return an error response unless the ToDo exists."""
        try:
            existing = self._repository.get(todo_id)
        except StorageError:
            logger.exception("Failed to fetch ToDo %s", todo_id)
            return _internal_error()

        if existing is None:
            return build_error_response(ApiError(ErrorKind.NOT_FOUND))
        return None


def _internal_error() -> ApiResponse:
    return build_error_response(ApiError(ErrorKind.INTERNAL))


def _bad_request(reason: str) -> ApiResponse:
    logger.info("Bad request: %s", reason)
    return build_error_response(ApiError(ErrorKind.BAD_REQUEST, reason))
