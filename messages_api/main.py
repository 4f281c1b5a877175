from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import get_database
from .presentation.api.errors import register_error_handlers
from .presentation.api.v1 import health, messages
from .presentation.middleware import CorrelationIdMiddleware

configure_logging(settings.service_name, debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting application", service=settings.service_name)

    db = get_database()
    try:
        logger.info(
            "Creating database tables",
            db_host=settings.db_host,
            db_name=settings.db_name,
        )
        await db.create_tables()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(
            "Failed to create database tables",
            error=str(e),
            error_type=type(e).__name__,
            db_host=settings.db_host,
            db_name=settings.db_name,
            exc_info=True,
        )
        raise

    yield

    await db.close()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Direct Messages API",
    description="Send, read and acknowledge messages between users",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(messages.router, prefix="/api/v1")


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
