"""API routes for todo management."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from todo_api.api.dependencies import get_todo_handler
from todo_api.models.wire import ApiRequest, ApiResponse, decode_body
from todo_api.services.todo_handler import TodoHandler

router = APIRouter()

# PATCH is accepted so that the dispatcher, not the router, answers with 405.
_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


async def _dispatch(
    request: Request,
    handler: TodoHandler,
    todo_id: Optional[str] = None,
) -> Response:
    raw_body = await request.body()
    api_request = ApiRequest(
        method=request.method,
        path_identifier=todo_id,
        body=decode_body(raw_body) if raw_body else None,
    )
    # Storage calls block, so keep them off the event loop.
    return _to_response(await run_in_threadpool(handler.handle, api_request))


def _to_response(api_response: ApiResponse) -> Response:
    return Response(
        content=api_response.body,
        status_code=api_response.status_code,
        headers=api_response.headers,
    )


@router.api_route("/todos", methods=_METHODS)
async def todos_collection(
    request: Request,
    handler: TodoHandler = Depends(get_todo_handler),
) -> Response:
    """List or create todo items."""
    return await _dispatch(request, handler)


@router.api_route("/todos/{todo_id}", methods=_METHODS)
async def todos_item(
    todo_id: str,
    request: Request,
    handler: TodoHandler = Depends(get_todo_handler),
) -> Response:
    """Get, update or delete a single todo item."""
    return await _dispatch(request, handler, todo_id)
