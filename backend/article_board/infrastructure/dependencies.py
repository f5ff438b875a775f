"""FastAPI dependency injection: wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from article_board.config import get_settings
from article_board.application.services import ArticleService
from article_board.infrastructure.database.session import get_db_session
from article_board.infrastructure.database.repositories import SQLAlchemyArticleRepository
from article_board.presentation.web.articles_controller import ArticleController
from article_board.presentation.web.view_renderer import Jinja2ViewRenderer, ViewRenderer


async def get_article_service(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> ArticleService:
    """Provides an ArticleService instance with its repository wired up.

    The session is function-scoped: it commits (or rolls back) as soon as
    the endpoint returns, before the response is sent.
    """
    repository = SQLAlchemyArticleRepository(session)
    return ArticleService(repository)


@lru_cache
def get_view_renderer() -> ViewRenderer:
    """Shared Jinja2 renderer: templates are loaded once per process."""
    settings = get_settings()
    return Jinja2ViewRenderer(
        templates_dir=settings.templates_dir or None,
        app_title=settings.app_title,
    )


async def get_article_controller(
    service: ArticleService = Depends(get_article_service),
    views: ViewRenderer = Depends(get_view_renderer),
) -> ArticleController:
    """Provides an ArticleController bound to this request's service."""
    return ArticleController(service=service, views=views)
