"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck.config import configure_logging, get_settings
from flashdeck.core import container
from flashdeck.exceptions import StorageConnectionError
from flashdeck.infrastructure.api.exception_handlers import register_exception_handlers
from flashdeck.infrastructure.api.routers import decks, flashcards, root, study_groups, users

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up storage before serving and release it on shutdown."""
    try:
        container.storage_facade().setup()
    except StorageConnectionError as e:
        logger.critical("storage_setup_failed", error=e.message)
        raise
    yield
    container.shutdown_resources()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="REST API for users, study groups, decks and flashcards",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(users.router, prefix=settings.API_V1_PREFIX)
    app.include_router(study_groups.router, prefix=settings.API_V1_PREFIX)
    app.include_router(decks.router, prefix=settings.API_V1_PREFIX)
    app.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logger.info("server_starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run("flashdeck.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
