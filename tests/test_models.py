"""Tests for the ToDo model and error taxonomy."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from todo_api.errors import ApiError, ErrorKind
from todo_api.models.todo import ToDo
from todo_api.models.wire import decode_body


class TestToDo:
    """Test suite for ToDo parsing and serialization."""

    def test_parse_defaults(self) -> None:
        """Missing fields take their empty defaults."""
        todo = ToDo.parse('{"title": "New ToDo"}')
        assert todo.id == ""
        assert todo.title == "New ToDo"
        assert todo.completed is False
        assert todo.mod_time is None

    def test_parse_wire_names(self) -> None:
        todo = ToDo.parse(
            '{"id": "abc", "title": "t", "completed": true, "modTime": "2024-01-02T03:04:05Z"}'
        )
        assert todo.id == "abc"
        assert todo.completed is True
        assert todo.mod_time == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_parse_ignores_unknown_fields(self) -> None:
        todo = ToDo.parse('{"title": "t", "priority": 3}')
        assert todo.title == "t"

    @pytest.mark.parametrize("body", ["garbage", "", None, "[]", '{"completed": {}}'])
    def test_parse_rejects_malformed_body(self, body) -> None:
        with pytest.raises(ValidationError):
            ToDo.parse(body)

    def test_parse_null_document_is_empty_todo(self) -> None:
        """A JSON null body decodes to a ToDo with default fields."""
        assert ToDo.parse("null") == ToDo()
        assert ToDo.parse(" null\n") == ToDo()

    def test_decode_body_replaces_invalid_utf8(self) -> None:
        text = decode_body(b"\xff\xfe")
        assert text == "\ufffd\ufffd"
        with pytest.raises(ValidationError):
            ToDo.parse(text)

    def test_to_wire_uses_camel_case(self) -> None:
        stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        wire = ToDo(id="abc", title="t", mod_time=stamp).to_wire()
        assert wire == {
            "id": "abc",
            "title": "t",
            "completed": False,
            "modTime": "2024-01-02T03:04:05Z",
        }


class TestApiError:
    """Test suite for ApiError messages and status codes."""

    @pytest.mark.parametrize(
        ("kind", "status_code", "message"),
        [
            (ErrorKind.NOT_FOUND, 404, "not found"),
            (ErrorKind.BAD_REQUEST, 400, "bad request"),
            (ErrorKind.METHOD_NOT_ALLOWED, 405, "method not allowed"),
            (ErrorKind.UNAUTHORIZED, 401, "unauthorized"),
            (ErrorKind.INTERNAL, 500, "internal server error"),
        ],
    )
    def test_defaults(self, kind: ErrorKind, status_code: int, message: str) -> None:
        error = ApiError(kind)
        assert error.status_code == status_code
        assert error.message == message
        assert str(error) == message

    def test_reason_prefixes_default_message(self) -> None:
        error = ApiError(ErrorKind.BAD_REQUEST, "ID is required")
        assert error.message == "ID is required: bad request"
        assert error.kind is ErrorKind.BAD_REQUEST
