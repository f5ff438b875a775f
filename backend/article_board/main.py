"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from article_board.config import get_settings
from article_board.infrastructure.database import Base, engine
from article_board.infrastructure.logging.log_config import setup_logging
from article_board.presentation.api.router import router as api_router
from article_board.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and create tables."""
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")

    yield

    await engine.dispose()


async def _server_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the failure and answer with a 500."""
    logger.exception(
        "Unhandled error during %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal Server Error",
            "error": f"{type(exc).__name__}: {exc}",
        },
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SQLAlchemyError, _server_error)
    app.add_exception_handler(Exception, _server_error)

    # Mount HTML pages and API routes
    app.include_router(web_router)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "article_board.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
