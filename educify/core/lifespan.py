"""
Application lifespan management
Handles startup and shutdown events
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from educify.config import settings
from educify.core.database import engine, Base
import educify.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application lifecycle events"""

    # STARTUP
    logger.info("=" * 60)
    logger.info("STARTING EDUCIFY API")
    logger.info("=" * 60)

    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set before starting the service")

    try:
        logger.info("Testing database connection...")
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")

        logger.info("Creating database tables (if needed)...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")

        logger.info("=" * 60)
        logger.info(f"SERVICE READY - Listening on port {settings.PORT}")
        logger.info("=" * 60)

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise RuntimeError("Database initialization failed") from e

    yield

    # SHUTDOWN
    logger.info("Shutting down Educify API...")
    engine.dispose()
    logger.info("Database connections closed")
