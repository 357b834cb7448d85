"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests can build their own instance

2. Lifespan Events
   - startup: log configuration, optionally create tables
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - Registered from bookstore_api.exceptions
   - Validation -> 400, not found -> 404, everything else -> generic 500
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookstore_api import __version__
from bookstore_api.config import get_settings
from bookstore_api.database import create_tables, engine
from bookstore_api.exceptions import register_exception_handlers
from bookstore_api.routers import authors_router, books_router, users_router
from bookstore_api.services.logger import configure_logging, get_logger_service

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()
configure_logging(settings)
logger = get_logger_service()


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name} {__version__}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    if settings.auto_create_tables:
        logger.warn("AUTO_CREATE_TABLES is on - creating missing tables")
        create_tables()

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


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
## BookStore API

A RESTful API for managing a book store.

### Resources
- **Authors**: Full CRUD operations for authors
- **Books**: Full CRUD operations for books
- **Users**: Registration and JWT login
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    # Registered before CORS so the catch-all middleware sits inside it
    register_exception_handlers(app)

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
    # Register Routers
    # -------------------------------------------------------------------------
    # /api/authors, /api/books, /api/users
    app.include_router(authors_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running.",
    )
    async def health_check() -> dict:
        """Liveness probe for load balancers and orchestrators."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore_api.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
