"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from google_dns_api.api.healthcheck import router as healthcheck_router
from google_dns_api.api.routes import router
from google_dns_api.core.config import get_settings
from google_dns_api.utils.decorators import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# Set google_dns_api loggers to INFO level
logging.getLogger("google_dns_api").setLevel(logging.INFO)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    # Startup
    init_sentry()
    settings = get_settings()

    logger.info("Google DNS API starting...")
    logger.info(f"Endpoint: {settings.endpoint}")
    logger.info(f"Timeout: {settings.timeout}s")
    logger.info(f"Padding: {settings.pad_to_length or 'disabled'}")
    logger.info(f"Sentry: {'enabled' if settings.sentry_dsn else 'disabled'}")

    yield

    # Shutdown
    logger.info("Google DNS API shutting down...")


app = FastAPI(
    title="Google DNS API",
    description="Google DNS-over-HTTPS JSON API client",
    version="1.0.0",
    lifespan=lifespan,
)

# Include API routes
app.include_router(router)
app.include_router(healthcheck_router)
