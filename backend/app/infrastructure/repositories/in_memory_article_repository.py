"""Concrete repository implementation backed by process memory."""

import asyncio
import logging
from dataclasses import replace

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port as an ordered in-memory list.

    Ids come from an explicit counter and are never reused, even after a
    delete.  A store rebuilt from persisted data must pass
    ``next_id=max(existing ids) + 1`` rather than starting over at 1.

    Callers only ever see copies of the stored records, so mutating a
    returned Article never changes the collection behind the lock.
    """

    def __init__(self, next_id: int = 1):
        self._articles: list[Article] = []
        self._next_id = next_id
        self._lock = asyncio.Lock()

    def _to_entity(self, stored: Article) -> Article:
        """Detach a stored record from the collection."""
        return replace(stored)

    def _find(self, article_id: int) -> Article | None:
        for stored in self._articles:
            if stored.id == article_id:
                return stored
        return None

    async def get_by_id(self, article_id: int) -> Article | None:
        async with self._lock:
            stored = self._find(article_id)
            return self._to_entity(stored) if stored else None

    async def get_all(self) -> list[Article]:
        async with self._lock:
            return [self._to_entity(stored) for stored in self._articles]

    async def create(self, article: Article) -> Article:
        async with self._lock:
            stored = Article(id=self._next_id, title=article.title, content=article.content)
            self._next_id += 1
            self._articles.append(stored)
            logger.debug("Stored article %d (collection size=%d)", stored.id, len(self._articles))
            return self._to_entity(stored)

    async def update(self, article: Article) -> Article:
        async with self._lock:
            stored = self._find(article.id) if article.id is not None else None
            if stored is None:
                raise EntityNotFoundError("Article", article.id)
            stored.update(title=article.title, content=article.content)
            return self._to_entity(stored)

    async def delete(self, article_id: int) -> bool:
        async with self._lock:
            remaining = [stored for stored in self._articles if stored.id != article_id]
            deleted = len(remaining) != len(self._articles)
            self._articles = remaining
            return deleted
