"""DynamoDB-backed todo repository."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from todo_api.errors import StorageError
from todo_api.models.todo import ToDo
from todo_api.repositories.base import TodoRepository

logger = logging.getLogger(__name__)

DEFAULT_TABLE_NAME = "todos"
DEFAULT_REGION = "us-west-2"

_BACKEND_ERRORS = (BotoCoreError, ClientError)


class DynamoDBTodoRepository(TodoRepository):
    """Stores todos in a DynamoDB table keyed by the string attribute ``id``."""

    def __init__(self, table: Any) -> None:
        self._table = table

    @classmethod
    def from_settings(
        cls,
        *,
        table_name: str = DEFAULT_TABLE_NAME,
        region: str = DEFAULT_REGION,
        endpoint_url: Optional[str] = None,
    ) -> "DynamoDBTodoRepository":
        """Build a repository around a boto3 ``Table`` resource."""
        resource = boto3.resource(
            "dynamodb",
            region_name=region,
            endpoint_url=endpoint_url,
            config=Config(retries={"max_attempts": 3, "mode": "standard"}),
        )
        return cls(resource.Table(table_name))

    def get(self, todo_id: str) -> Optional[ToDo]:
        try:
            result = self._table.get_item(Key={"id": todo_id})
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"Could not get ToDo {todo_id} from database") from exc

        item = result.get("Item")
        if not item:
            return None
        try:
            todo = _from_item(item)
        except ValidationError as exc:
            raise StorageError(f"Could not unmarshal ToDo {todo_id}") from exc

        # An item without an id is indistinguishable from a miss.
        if not todo.id:
            return None
        return todo

    def get_all(self) -> List[ToDo]:
        items: List[Dict[str, Any]] = []
        scan_kwargs: Dict[str, Any] = {}
        try:
            while True:
                result = self._table.scan(**scan_kwargs)
                items.extend(result.get("Items", []))
                last_key = result.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except _BACKEND_ERRORS as exc:
            raise StorageError("Could not get ToDos from database") from exc

        try:
            return [_from_item(item) for item in items]
        except ValidationError as exc:
            raise StorageError("Could not unmarshal ToDos") from exc

    def save(self, todo: ToDo) -> None:
        self.stamp(todo)
        try:
            self._table.put_item(Item=_to_item(todo))
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"Could not save ToDo {todo.id} to database") from exc
        logger.debug("Saved ToDo %s", todo.id)

    def delete(self, todo_id: str) -> None:
        try:
            self._table.delete_item(Key={"id": todo_id})
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"Could not delete ToDo {todo_id} from database") from exc


def _to_item(todo: ToDo) -> Dict[str, Any]:
    item = todo.to_wire()
    # DynamoDB rejects explicit nulls for absent attributes.
    return {key: value for key, value in item.items() if value is not None}


def _from_item(item: Dict[str, Any]) -> ToDo:
    return ToDo.model_validate(dict(item))
