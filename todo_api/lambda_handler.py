"""AWS Lambda entry point for API Gateway proxy events.

The handler and its repository are built once per container on first use and
reused across invocations.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Dict, Optional

from todo_api.api.dependencies import build_repository
from todo_api.api.responses import build_error_response
from todo_api.errors import ApiError, ErrorKind
from todo_api.logging_utils import configure_logging, request_context
from todo_api.models.wire import ApiRequest, ApiResponse, decode_body
from todo_api.services.todo_handler import TodoHandler
from todo_api.settings import get_settings

logger = logging.getLogger(__name__)

_handler: Optional[TodoHandler] = None


def _get_handler() -> TodoHandler:
    global _handler
    if _handler is None:
        settings = get_settings()
        configure_logging(settings.log_level)
        _handler = TodoHandler(build_repository(settings))
        logger.info("Initialized ToDo handler (backend=%s)", settings.storage_backend)
    return _handler


def request_from_event(event: Dict[str, Any]) -> ApiRequest:
    """Convert an API Gateway proxy event into an ``ApiRequest``.

    Raises ``binascii.Error`` when a base64-flagged body is not valid base64.
    """
    path_parameters = event.get("pathParameters") or {}
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        body = decode_body(base64.b64decode(body))
    return ApiRequest(
        method=event.get("httpMethod") or "",
        path_identifier=path_parameters.get("id"),
        body=body,
    )


def response_to_event(response: ApiResponse) -> Dict[str, Any]:
    """Convert an ``ApiResponse`` into an API Gateway proxy response."""
    return {
        "statusCode": response.status_code,
        "headers": dict(response.headers),
        "body": response.body,
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    handler = _get_handler()
    with request_context(getattr(context, "aws_request_id", None)):
        try:
            request = request_from_event(event)
        except binascii.Error as exc:
            # Undecodable bodies are reported like unparseable ones.
            logger.warning("Could not decode base64 body: %s", exc)
            return response_to_event(build_error_response(ApiError(ErrorKind.INTERNAL)))
        return response_to_event(handler.handle(request))
