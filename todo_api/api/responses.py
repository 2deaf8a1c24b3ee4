"""Serialization of payloads and errors into wire responses."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import status

from todo_api.errors import ApiError
from todo_api.models.todo import ToDo
from todo_api.models.wire import ApiResponse

logger = logging.getLogger(__name__)


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Credentials": "true",
        "Content-Type": "application/json",
    }


def _encode_default(value: Any) -> Any:
    if isinstance(value, ToDo):
        return value.to_wire()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(payload: Any) -> str:
    return json.dumps(payload, default=_encode_default, separators=(",", ":"))


def build_response(payload: Any, status_code: int) -> ApiResponse:
    """Serialize ``payload`` into a response with ``status_code``.

    If the payload cannot be serialized the response is downgraded to a 500
    carrying the serialization error. A failure to serialize that error
    propagates to the caller.
    """
    try:
        body = _dumps(payload)
    except (TypeError, ValueError) as exc:
        logger.error("Could not serialize response payload: %s", exc)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = _dumps(_error_payload(str(exc)))

    return ApiResponse(status_code=status_code, headers=cors_headers(), body=body)


def build_ok_response(payload: Any) -> ApiResponse:
    return build_response(payload, status.HTTP_200_OK)


def build_error_response(error: ApiError) -> ApiResponse:
    """Map ``error`` to its status code and an ``{"error": ...}`` body."""
    return build_response(_error_payload(error.message), error.status_code)


def _error_payload(message: str) -> Dict[str, str]:
    if not message:
        return {}
    return {"error": message}
