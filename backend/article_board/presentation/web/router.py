"""HTML router: article pages plus the site root."""

from fastapi import APIRouter, status
from starlette.responses import RedirectResponse

from article_board.presentation.web.articles_controller import ARTICLES_PATH
from article_board.presentation.web.endpoints.articles import router as articles_router

router = APIRouter()
router.include_router(articles_router)


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    """Send visitors at the site root to the article list."""
    return RedirectResponse(url=ARTICLES_PATH, status_code=status.HTTP_302_FOUND)
