"""Transport-neutral request and response shapes."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class ApiRequest(BaseModel):
    """An inbound HTTP-shaped request.

    ``path_identifier`` is ``None`` when the request addresses the collection
    rather than a single ToDo.
    """

    method: str
    path_identifier: Optional[str] = None
    body: Optional[str] = None


class ApiResponse(BaseModel):
    """An outbound HTTP-shaped response."""

    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""


def decode_body(raw: bytes) -> str:
    """Decode a request body as UTF-8.

    Invalid sequences become U+FFFD, so undecodable input reaches the body
    parser and is rejected there like any other malformed body.
    """
    return raw.decode("utf-8", errors="replace")
