"""
FastAPI Application Entry Point

This module provides the FastAPI application serving Guardian sections as
RSS 2.0 feeds.

Usage:
    uvicorn guardian_rss.api.main:app --reload --port 8000

Or with the CLI:
    python -m guardian_rss.api.main
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from guardian_rss.api.middleware import LoggingMiddleware
from guardian_rss.api.routes import feeds_router
from guardian_rss.config.settings import get_app_settings
from guardian_rss.utils.logging_config import configure_logging, get_logger

# Load environment variables
load_dotenv()

# Initialize logging (must be called before creating loggers)
configure_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    guardian = get_app_settings().guardian
    logger.info(
        "Starting Guardian RSS API",
        base_url=guardian.base_url,
        cache_ttl_minutes=guardian.cache_ttl_minutes,
        request_timeout_seconds=guardian.request_timeout_seconds,
    )

    yield

    logger.info("Shutting down API")


def create_app() -> FastAPI:
    """Build the application with middleware and routes attached."""
    application = FastAPI(
        title="Guardian RSS API",
        description="Serves the newest Guardian articles of a section as an RSS 2.0 feed",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Add logging middleware (must be added before other middleware for accurate timing)
    application.add_middleware(LoggingMiddleware)

    application.include_router(feeds_router)
    return application


app = create_app()


def main():
    """Run the API server."""
    import uvicorn

    api_settings = get_app_settings().api

    uvicorn.run(
        "guardian_rss.api.main:app",
        host=api_settings.host,
        port=api_settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
