"""
Educify API
Main FastAPI application entry point
"""
import logging

from fastapi import FastAPI

from educify.config import settings
from educify.core.lifespan import lifespan
from educify.core.middleware import setup_middleware
from educify.routes import auth, tutors, bookings, payments, promo, system

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Tutoring marketplace: tutors, bookings, reviews, payments and promo codes",
    lifespan=lifespan,
)

setup_middleware(app)

app.include_router(system.router)
app.include_router(auth.router)
app.include_router(tutors.router)
app.include_router(bookings.router)
app.include_router(payments.router)
app.include_router(promo.router)


def run():
    import uvicorn

    uvicorn.run(
        "educify.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
