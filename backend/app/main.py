"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.application.interfaces import ArticleRepository
from app.config import get_settings
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.repositories import InMemoryArticleRepository
from app.presentation.api.router import router as api_router
from app.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and announce the listening port."""
    settings = get_settings()
    setup_logging()
    logger.info("Server running on port %d", settings.port)

    yield

    articles = await app.state.article_repository.get_all()
    logger.info("Shutting down — discarding %d in-memory article(s)", len(articles))


def _mount_static(app: FastAPI, static_dir: str) -> None:
    """Serve the logo and editor bundle from the site root, after every page route."""
    if not Path(static_dir).is_dir():
        logger.warning("Static directory '%s' not found; logo and editor assets are not served", static_dir)
        return
    app.mount("/", StaticFiles(directory=static_dir), name="static")


def create_app(article_repository: ArticleRepository | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The article store is owned by the returned app; each call starts with
    a fresh, empty collection unless one is passed in.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.article_repository = article_repository or InMemoryArticleRepository()

    # Mount routes; the static mount goes last so it only sees unmatched paths
    app.include_router(api_router)
    app.include_router(web_router)
    _mount_static(app, settings.static_dir)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
    )
