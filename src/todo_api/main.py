from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import init_database
from .errors import StorageError, TodoNotFoundError
from .repositories import TodoRepository
from .routers import todos as todos_router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the database before the first request is accepted and release it on shutdown.

    A StorageBootstrapError propagates out of here, which stops the server
    from starting.
    """
    settings: Settings = app.state.settings
    engine = init_database(settings.sqlite_db_path)
    app.state.repository = TodoRepository(engine)
    logger.info("Todo API ready, serving on http://%s:%s", settings.host, settings.port)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Todo API shut down")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


async def not_found_exception_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Todo not found"})


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Log the storage failure and answer with a generic 500 that leaks no internals."""
    logger.error("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "StorageError", "message": "Internal server error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected exceptions: log them and return a generic 500."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "InternalServerError", "message": "Internal server error"},
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Override settings (useful for testing). Defaults to get_settings().
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo API",
        description="CRUD service for todo items stored in SQLite.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(TodoNotFoundError, not_found_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy", "database": settings.sqlite_db_path}

    app.include_router(todos_router.router)
    return app


app = create_app()
