import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings, get_settings
from app.core.errors import request_validation_error_handler
from app.core.logging import setup_logging
from app.database import apply_migrations, engine
from app.routers import health_router, products_router

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    if settings.MIGRATE_ON_STARTUP:
        applied = apply_migrations(engine)
        if applied:
            logger.info("Database migrated to version %s", applied[-1])
    try:
        yield
    finally:
        engine.dispose()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(health_router)
app.include_router(products_router)


__all__ = ["app"]
