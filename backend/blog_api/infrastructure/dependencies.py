"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from blog_api.application.interfaces import ArticleStore
from blog_api.application.services import ArticleService
from blog_api.config import Settings
from blog_api.infrastructure.database import create_store_engine
from blog_api.infrastructure.database.repositories import SQLAlchemyArticleStore


def build_article_store(settings: Settings) -> SQLAlchemyArticleStore:
    """Create the process-wide store for the configured database file.

    No connection is opened until the first transaction.
    """
    engine = create_store_engine(
        settings.db,
        busy_timeout_ms=settings.db_busy_timeout_ms,
    )
    return SQLAlchemyArticleStore(engine)


def get_article_store(request: Request) -> ArticleStore:
    """Returns the single store instance shared by all requests."""
    return request.app.state.article_store


async def get_article_service(
    store: ArticleStore = Depends(get_article_store),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService bound to the shared store."""
    yield ArticleService(store)
