from typing import Optional

from fastapi import FastAPI

from kilatstorage.config.logger import configure_logging, get_logger
from kilatstorage.config.settings import Settings, get_settings
from kilatstorage.s3.router import router as s3_router

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level=settings.logging.level)

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        debug=settings.debug,
    )

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting %s v%s (endpoint: %s)", settings.title, settings.version, settings.storage.endpoint)

    @app.get("/health", tags=["Main"])
    async def root():
        return {"app": settings.title, "version": settings.version, "status": "running"}

    app.include_router(s3_router)
    return app
