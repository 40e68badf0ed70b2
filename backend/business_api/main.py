"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from business_api.api.errors import register_exception_handlers
from business_api.api.v1 import businesses, photos, reviews
from business_api.core.config import settings
from business_api.core.logging import get_logger, setup_logging
from business_api.db.session import engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.effective_log_level, json_logs=settings.LOG_JSON)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)
    yield
    await engine.dispose()
    logger.info("Application shutting down")


app = FastAPI(
    title="Business Directory API",
    description="Businesses with their user reviews and photos",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(businesses.router)
app.include_router(reviews.router)
app.include_router(photos.router)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
