"""Repository port for articles: the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_board.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, newest first."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
