"""Article HTML endpoints: thin FastAPI bindings onto ArticleController."""

from fastapi import APIRouter, Depends, Form, Request
from starlette.responses import Response

from article_board.application.schemas import ArticleForm
from article_board.infrastructure.dependencies import get_article_controller
from article_board.presentation.web.articles_controller import ARTICLES_PATH, ArticleController

router = APIRouter(prefix=ARTICLES_PATH, tags=["Articles"])


def article_form(
    title: str = Form(""),
    author: str = Form(""),
    body: str = Form(""),
) -> ArticleForm:
    """Collect the form-encoded article fields; missing ones arrive empty."""
    return ArticleForm(title=title, author=author, body=body)


@router.get("")
async def list_articles(
    request: Request,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    """List every article, newest first."""
    return await controller.index(request)


@router.get("/new")
async def new_article_form(
    request: Request,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    """Render the empty create form."""
    return await controller.new_form(request)


@router.post("")
async def create_article(
    request: Request,
    form: ArticleForm = Depends(article_form),
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    """Create an article, or redisplay the form with its errors."""
    return await controller.create(request, form)


@router.get("/{article_id:int}/edit")
async def edit_article_form(
    request: Request,
    article_id: int,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    return await controller.edit_form(request, article_id)


@router.get("/{article_id:int}")
async def show_article(
    request: Request,
    article_id: int,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    return await controller.show(request, article_id)


@router.post("/{article_id:int}/edit")
async def update_article(
    request: Request,
    article_id: int,
    form: ArticleForm = Depends(article_form),
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    """Apply submitted fields to an article, or redisplay the edit form."""
    return await controller.update(request, article_id, form)


@router.get("/{article_id:int}/delete")
async def delete_article_form(
    request: Request,
    article_id: int,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    """Render the delete confirmation page."""
    return await controller.delete_form(request, article_id)


@router.post("/{article_id:int}/delete")
async def delete_article(
    request: Request,
    article_id: int,
    controller: ArticleController = Depends(get_article_controller),
) -> Response:
    return await controller.delete(request, article_id)
