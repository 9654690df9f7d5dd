"""Application service (use case) for Article operations."""

import logging

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(title=data.title, content=data.content)
        created = await self._repository.create(article)
        logger.info("Created article %d: %r", created.id, created.title)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        article.update(title=data.title, content=data.content)
        updated = await self._repository.update(article)
        logger.info("Updated article %d", article_id)
        return updated

    async def delete_article(self, article_id: int) -> bool:
        """Delete an article; deleting an unknown id is a silent no-op."""
        deleted = await self._repository.delete(article_id)
        if deleted:
            logger.info("Deleted article %d", article_id)
        else:
            logger.debug("Delete ignored — no article with id %d", article_id)
        return deleted
