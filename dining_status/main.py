import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dining_status.api.routes import router
from dining_status.core.config import settings
from dining_status.halls import DINING_HALLS

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Nothing is persisted, so startup only configures logging and reports
    the configured halls.
    """
    configure_logging()
    logger.info(
        "Starting Dining Status service: %d halls, mock=%s",
        len(DINING_HALLS), settings.USE_MOCK,
    )

    yield

    logger.info("Shutting down Dining Status service")

app = FastAPI(
    title="Dining Status",
    description="Live open/busy/closed status for campus dining halls",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Dining Status",
        "version": "1.0.0",
        "endpoints": {
            "status": "GET /api/dining/status",
            "hall_status": "GET /api/dining/status/{hall_id}",
            "halls": "GET /api/dining/halls",
            "debug": "POST /api/dining/debug/{hall_id}",
            "health": "GET /health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Dining Status"}
