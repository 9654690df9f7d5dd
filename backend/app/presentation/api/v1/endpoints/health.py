"""Health check endpoint — reports version, environment and store size."""

from fastapi import APIRouter, Depends

from app.application.services import ArticleService
from app.config import get_settings
from app.infrastructure.dependencies import get_article_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    service: ArticleService = Depends(get_article_service),
) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    articles = await service.list_articles()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "articles": len(articles),
    }
