"""FastAPI application entry point.

Blog API - list, search, paginate, view, create, edit and delete posts.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_api.routes import api_router
from blog_api.schemas import ErrorDetail, ErrorResponse
from blog_api.services.post_store import PostStore, StorageCorruptError
from blog_api.settings import get_settings
from blog_api.stores.storage import close_storage, init_storage

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()

    try:
        storage = init_storage()
        logger.info(f"Storage backend: {settings.storage_backend}")
        if settings.seed_on_startup:
            PostStore(storage).initialize()
    except Exception:
        logger.exception("Storage init failed")

    yield

    # Shutdown
    close_storage()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Blog authoring and browsing API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageCorruptError)
    async def storage_corrupt_handler(request: Request, exc: StorageCorruptError) -> JSONResponse:
        """Unparsable stored posts: nothing to recover, report it."""
        error = ErrorResponse(error=ErrorDetail(code="STORAGE_CORRUPT", message=str(exc)))
        return JSONResponse(status_code=500, content=error.model_dump())

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc) if settings.debug else "Internal server error",
                    "detail": None,
                }
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
