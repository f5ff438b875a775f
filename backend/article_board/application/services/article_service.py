"""Application service (use case) for Article operations."""

import logging

from article_board.application.interfaces import ArticleRepository
from article_board.application.schemas import ArticleForm
from article_board.domain.entities import Article
from article_board.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Validation failures surface as ``ValidationError`` and absent rows on
    mutation as ``EntityNotFoundError``; anything raised by the repository
    itself propagates unchanged.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def find_article(self, article_id: int) -> Article | None:
        return await self._repository.get_by_id(article_id)

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, form: ArticleForm) -> Article:
        article = Article(title=form.title, author=form.author, body=form.body)
        article.validate()
        created = await self._repository.create(article)
        logger.info("Created article %s", created.id)
        return created

    async def update_article(self, article_id: int, form: ArticleForm) -> Article:
        article = await self.get_article(article_id)
        article.update(title=form.title, author=form.author, body=form.body)
        updated = await self._repository.update(article)
        logger.info("Updated article %s", updated.id)
        return updated

    async def delete_article(self, article_id: int) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return deleted
