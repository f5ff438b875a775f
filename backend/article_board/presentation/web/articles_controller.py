"""Article controller: maps each HTML route onto one service call.

Every action answers with exactly one of: a rendered view, a redirect,
or a bare status code. Validation failures are recovered here by
re-rendering the originating form; everything else propagates to the
application's exception handlers.
"""

import logging

from fastapi import Request, status
from starlette.responses import RedirectResponse, Response

from article_board.application.schemas import ArticleForm
from article_board.application.services import ArticleService
from article_board.domain.exceptions import EntityNotFoundError, ValidationError
from article_board.presentation.web.view_renderer import ViewRenderer

logger = logging.getLogger(__name__)

ARTICLES_PATH = "/articles"


def article_path(article_id: int) -> str:
    return f"{ARTICLES_PATH}/{article_id}"


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


class ArticleController:
    """Request handlers for the articles resource.

    Collaborators are injected so the controller can be exercised with
    fakes; one instance is created per request.
    """

    def __init__(self, service: ArticleService, views: ViewRenderer):
        self._service = service
        self._views = views

    async def index(self, request: Request) -> Response:
        articles = await self._service.list_articles()
        return self._views.render(
            request, "articles/index", {"articles": articles, "title": "Articles"}
        )

    async def new_form(self, request: Request) -> Response:
        return self._views.render(
            request, "articles/new", {"article": ArticleForm(), "title": "New Article"}
        )

    async def create(self, request: Request, form: ArticleForm) -> Response:
        try:
            article = await self._service.create_article(form)
        except ValidationError as exc:
            logger.info("Rejected new article: %s", exc)
            invalid = form.with_errors(exc.errors)
            return self._views.render(
                request,
                "articles/new",
                {"article": invalid, "errors": invalid.messages, "title": "New Article"},
            )
        return _redirect(article_path(article.id))

    async def edit_form(self, request: Request, article_id: int) -> Response:
        article = await self._service.find_article(article_id)
        if article is None:
            return _not_found()
        return self._views.render(
            request,
            "articles/edit",
            {"article": ArticleForm.from_article(article), "title": "Edit Article"},
        )

    async def show(self, request: Request, article_id: int) -> Response:
        article = await self._service.find_article(article_id)
        if article is None:
            return _not_found()
        return self._views.render(
            request, "articles/show", {"article": article, "title": article.title}
        )

    async def update(self, request: Request, article_id: int, form: ArticleForm) -> Response:
        try:
            article = await self._service.update_article(article_id, form)
        except EntityNotFoundError:
            logger.debug("Update of missing article %s", article_id)
            return _not_found()
        except ValidationError as exc:
            logger.info("Rejected edit of article %s: %s", article_id, exc)
            # keep the id so the form posts back to the same article
            invalid = form.model_copy(update={"id": article_id}).with_errors(exc.errors)
            return self._views.render(
                request,
                "articles/edit",
                {"article": invalid, "errors": invalid.messages, "title": "Edit Article"},
            )
        return _redirect(article_path(article.id))

    async def delete_form(self, request: Request, article_id: int) -> Response:
        article = await self._service.find_article(article_id)
        return self._views.render(
            request, "articles/delete", {"article": article, "title": "Delete Article"}
        )

    async def delete(self, request: Request, article_id: int) -> Response:
        try:
            await self._service.delete_article(article_id)
        except EntityNotFoundError:
            logger.debug("Delete of missing article %s", article_id)
            return _not_found()
        return _redirect(ARTICLES_PATH)
