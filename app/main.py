"""
Ride Review Service - Main Application Entry Point

Persistence layer for drivers, passengers, bookings and their reviews,
exposed read-only over HTTP. On startup the review demo runs once against
the configured database.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.config import get_settings
from app.core.logging import setup_logging, get_logger
from app.core.metrics import metrics_endpoint
from app.api.router import api_router
from app.api.middleware import RequestLoggingMiddleware
from app.bootstrap import run_bootstrap
from app.db.session import engine, init_models

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    if settings.CREATE_SCHEMA_ON_STARTUP:
        await init_models()
        logger.info("schema_created")

    if settings.BOOTSTRAP_ON_STARTUP:
        await run_bootstrap()

    yield

    await engine.dispose()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Drivers, bookings and reviews over a relational store",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/metrics", tags=["Health"])
def metrics():
    return metrics_endpoint()
