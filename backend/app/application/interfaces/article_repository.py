"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for the article collection — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article in insertion order."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Store a new article and return it with the assigned ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Overwrite an existing article. Raises EntityNotFoundError if absent."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
