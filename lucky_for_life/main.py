"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from lucky_for_life.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
if settings.LOG_FILE:
    logger.add(str(settings.LOG_FILE), rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: analyze the history file once at startup."""
    logger.info("Starting {} ...", settings.APP_NAME)
    settings.EXPORT_DIR.mkdir(parents=True, exist_ok=True)

    from lucky_for_life.services import analysis_service

    if settings.DATA_FILE.exists():
        analysis_service.get_analyzer()
    else:
        logger.warning("History file {} not found; analysis deferred", settings.DATA_FILE)

    yield

    analysis_service.set_analyzer(None)
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Lucky for Life drawing statistics and cosmic correlation analysis",
    lifespan=lifespan,
)

# Include API routers
from lucky_for_life.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
def health() -> dict:
    return {"status": "ok", "app": settings.APP_NAME}
