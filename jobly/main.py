"""
FastAPI application entry point for the Jobly API.

Configures logging, CORS, error handlers and API routers, and manages the
database pool through the application lifespan.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobly import __version__
from jobly.api import api_router
from jobly.core.config import get_settings
from jobly.core.database import close_db, init_db
from jobly.core.errors import register_exception_handlers


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for application startup and shutdown.

    On startup the database pool is created; a failure is logged and the
    first request retries through get_db_pool(). On shutdown the pool is
    closed.
    """
    logger.info("Jobly API starting")
    try:
        await init_db()
        logger.info("Database connection pool initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")

    yield

    logger.info("Jobly API shutting down")
    await close_db()
    logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Jobly API",
        version=__version__,
        description="Companies and jobs: CRUD and filtered search.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring and load balancer probes."""
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        """API name, version and documentation links."""
        return {
            "name": "Jobly API",
            "version": __version__,
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobly.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
