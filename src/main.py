"""todolist - in-memory task tracker with a JSON API and a browser client."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.core.config import constants, settings
from src.core.errors import ErrorResponse, TodoError
from src.core.logging import configure_logfire, instrument_fastapi, log_with_context
from src.core.todo_store import TodoStore
from src.domain.todo import utc_now_iso
from src.interface.todo_router import router as todo_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Configure logging first so startup logs are captured
    configure_logfire()
    logger.info("todolist_started", extra={"port": settings.port, "todos": app.state.store.count()})
    yield
    logger.info("todolist_stopped", extra={"todos": app.state.store.count()})


async def todo_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render store errors as ``{"error": message}`` with their status code."""
    assert isinstance(exc, TodoError)
    log_with_context(
        logger,
        "warning",
        "todo_request_failed",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(content=exc.to_response().model_dump(), status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render malformed or mistyped request bodies as a 400 error."""
    assert isinstance(exc, RequestValidationError)
    logger.warning("invalid_request_body", extra={"path": request.url.path, "error": str(exc.errors())})
    return JSONResponse(
        content=ErrorResponse(error=constants.MSG_INVALID_BODY).model_dump(),
        status_code=constants.HTTP_BAD_REQUEST,
    )


def create_app(store: TodoStore | None = None) -> FastAPI:
    """Build the FastAPI application around a todo store.

    Args:
        store: Store to serve; a fresh empty store is created when omitted

    Returns:
        Configured application with API routes, health check and client assets
    """
    app = FastAPI(
        title="todolist",
        description="In-memory task tracker",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else TodoStore()

    # Any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Instrument FastAPI with Logfire
    instrument_fastapi(app)

    app.include_router(todo_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse(content={"status": "OK", "timestamp": utc_now_iso()}, status_code=constants.HTTP_OK)

    # Mounted last so API routes take precedence over static files
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.warning("public_dir_missing", extra={"public_dir": str(settings.public_dir)})

    return app


app = create_app()


def run() -> None:
    """Launch the API server on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
