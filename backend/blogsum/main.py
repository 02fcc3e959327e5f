"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogsum import __version__
from blogsum.api.errors import register_exception_handlers
from blogsum.api.v1.router import api_router
from blogsum.config import get_settings
from blogsum.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s in %s mode", settings.app_name, settings.environment)

    from blogsum.api.deps import get_pipeline
    from blogsum.db.dynamodb import dynamodb
    from blogsum.db.postgres import dispose_engine, init_db

    if settings.init_storage_on_startup:
        try:
            await init_db()
            logger.info("PostgreSQL tables initialized")
        except Exception as e:
            logger.warning("PostgreSQL init error (may be offline): %s", e)

        try:
            await dynamodb.create_table_if_not_exists()
            logger.info("DynamoDB tables initialized")
        except Exception as e:
            logger.warning("DynamoDB init error (may be offline): %s", e)

    yield

    # Shutdown
    logger.info("Shutting down...")
    await get_pipeline().extractor.close()
    await dynamodb.close()
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Summarize blog posts and translate the summaries to Urdu",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
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
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
