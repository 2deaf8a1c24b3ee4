"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from todo_api import __version__
from todo_api.api.routes import router as api_router
from todo_api.logging_utils import configure_logging, request_context
from todo_api.settings import get_settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Todo API",
    description="A simple todo management API with CRUD operations",
    version=__version__,
)


@app.middleware("http")
async def correlate_request(request: Request, call_next):
    with request_context(request.headers.get("X-Request-ID")) as request_id:
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": "Todo API",
        "endpoints": "/api/todos",
    }


@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
app.include_router(api_router)


def main() -> None:
    """Run the development server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting on 0.0.0.0:%s (STORAGE_BACKEND=%s)",
        settings.port,
        settings.storage_backend,
    )
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level="info", access_log=True)


if __name__ == "__main__":
    main()
