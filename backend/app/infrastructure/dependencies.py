"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.application.interfaces import ArticleRepository
from app.application.services import ArticleService


def get_article_repository(request: Request) -> ArticleRepository:
    """Returns the article store owned by the running application."""
    return request.app.state.article_repository


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
