"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database.repositories import SQLAlchemyArticleStore
from blog_api.infrastructure.dependencies import build_article_store
from blog_api.infrastructure.logging.log_config import setup_logging
from blog_api.infrastructure.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from blog_api.presentation.api.cors import CrossOriginMiddleware
from blog_api.presentation.api.errors import register_exception_handlers
from blog_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, release the engine."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    store: SQLAlchemyArticleStore = app.state.article_store
    await store.initialize()
    logger.info("Article store ready at %s", settings.db)

    yield

    await store.close()


def create_app(
    settings: Settings | None = None,
    article_store: SQLAlchemyArticleStore | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.article_store = article_store or build_article_store(settings)

    # Last added runs first: cross-origin headers and OPTIONS answers wrap
    # the rate limiter, so OPTIONS requests never consume budget
    app.add_middleware(
        RateLimitMiddleware,
        limiter=FixedWindowRateLimiter(settings.rate_limit_per_minute, period=60.0),
    )
    app.add_middleware(CrossOriginMiddleware, allow_origins=settings.cors_origins)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app on the configured address."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.listen_host,
        port=settings.listen_port,
    )


if __name__ == "__main__":
    run()
