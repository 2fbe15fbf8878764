"""
System routes (health check, root)
"""
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Response, status
from sqlalchemy import text

from educify.config import settings
from educify.core import engine

router = APIRouter(tags=["System"])


@router.get("/api/health")
def health_check(response: Response):
    """
    Health check endpoint
    Tests actual database connectivity
    """
    health_status = {
        "status": "healthy",
        "service": settings.APP_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {},
    }

    try:
        start_time = time.time()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        db_response_time = round((time.time() - start_time) * 1000, 2)  # ms

        health_status["checks"]["database"] = {
            "status": "healthy",
            "response_time_ms": db_response_time,
            "pool": engine.pool.status(),
        }
    except Exception as e:
        health_status["checks"]["database"] = {"status": "unhealthy", "error": str(e)}
        health_status["status"] = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return health_status


@router.get("/")
def root():
    """Root endpoint - basic info"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": {
            "health": "/api/health",
            "docs": "/docs",
            "auth": "/api/auth",
            "tutors": "/api/tutors",
            "bookings": "/api/bookings",
            "payments": "/api/payments",
            "promo": "/api/promo",
        },
    }
