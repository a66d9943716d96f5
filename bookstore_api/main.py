"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory
   - create_app() returns a configured app; tests import the module-level
     instance and override its dependencies

2. Lifespan Events
   - startup/shutdown logging, engine disposal on shutdown

3. Error Responder
   - every failure leaves through one of the exception handlers below
   - APIError subclasses -> their status code, {"error": message}
   - request validation -> 400, {"errors": [{field, message, location}]}
   - anything else -> 500, {"error": "Internal Server Error"}; the details
     only go to the log
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore_api.config import get_settings
from bookstore_api.database import engine, ping_database
from bookstore_api.dependencies import DbSession
from bookstore_api.errors import APIError
from bookstore_api.routers import authors_router, books_router

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name} {settings.api_version}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Error Formatting
# =============================================================================
def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Flatten Pydantic validation errors into per-field messages.

    Messages raised by our own field validators are passed through as-is
    ("Name is required"); Pydantic's own messages are used otherwise.

    Args:
        errors: RequestValidationError.errors()

    Returns:
        [{"field": ..., "message": ..., "location": ...}, ...]
    """
    formatted = []
    for error in errors:
        loc = error.get("loc", ())
        location = str(loc[0]) if loc else "body"
        # json_invalid locations end in a character offset, not a field name
        if error.get("type") == "json_invalid" or len(loc) < 2:
            field = location
        else:
            field = str(loc[-1])

        cause = (error.get("ctx") or {}).get("error")
        message = str(cause) if isinstance(cause, Exception) else error.get("msg", "Invalid value")

        formatted.append({"field": field, "message": message, "location": location})
    return formatted


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

A RESTful API for managing authors and their books.

### Features
- **Authors**: Full CRUD, plus each author's book list
- **Books**: Full CRUD, listing with author names and an author filter

### Referential integrity
- A book can only be created or updated for an existing author
- An author cannot be deleted while books reference it
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Convert a declared API error into its status code and message."""
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report invalid request input as 400 with per-field messages."""
        errors = format_validation_errors(exc.errors())
        logger.info(f"{request.method} {request.url.path} -> 400: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unmatched routes and methods use the same error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error while hiding details from users.
        """
        logger.error(
            f"Database error on {request.method} {request.url}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        The response never carries the original message, in debug mode
        included.
        """
        logger.error(
            f"Unhandled error on {request.method} {request.url}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(authors_router)
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint.

        Used by load balancers and container orchestrators.
        """
        database_ok = ping_database(db)
        return {
            "status": "healthy" if database_ok else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": {"connected": database_ok},
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message, API version and available endpoints.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to the {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "endpoints": {
                "authors": {
                    "get_all": "GET /authors",
                    "get_one": "GET /authors/:id",
                    "create": "POST /authors",
                    "update": "PUT /authors/:id",
                    "delete": "DELETE /authors/:id",
                    "get_books": "GET /authors/:id/books",
                },
                "books": {
                    "get_all": "GET /books",
                    "get_all_by_author": "GET /books?author=:authorId",
                    "get_one": "GET /books/:id",
                    "create": "POST /books",
                    "update": "PUT /books/:id",
                    "delete": "DELETE /books/:id",
                },
            },
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore_api.main:app
app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m bookstore_api.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
