"""Application service (use case) for Article operations."""

import logging

from blog_api.application.interfaces import ArticleStore
from blog_api.application.schemas import ArticleCreate
from blog_api.domain.entities import Article, SortOrder
from blog_api.domain.exceptions import InvalidRequestError

logger = logging.getLogger(__name__)


def _require(value: str | None, message: str) -> str:
    if not value:
        raise InvalidRequestError(message)
    return value


class ArticleService:
    """Validates request parameters, then delegates to the store port (DI).

    Validation happens here so that bad input never opens a transaction.
    """

    def __init__(self, store: ArticleStore):
        self._store = store

    async def create_article(self, user_id: str, data: ArticleCreate) -> Article:
        _require(user_id, "user ID is missing")
        _require(data.title, "missing title")
        article = await self._store.put(user_id, Article(title=data.title, content=data.content))
        logger.info("Stored article '%s' for user '%s'", article.title, user_id)
        return article

    async def get_article(self, user_id: str, title: str) -> Article:
        _require(user_id, "missing ID")
        _require(title, "missing title")
        return await self._store.get(user_id, title)

    async def list_articles(self, user_id: str, sort: str | None = None) -> list[Article]:
        _require(user_id, "missing ID")
        order = SortOrder.parse(sort)
        return await self._store.get_all(user_id, order)

    async def delete_article(self, user_id: str, title: str) -> None:
        _require(user_id, "missing ID")
        _require(title, "missing title")
        await self._store.delete(user_id, title)
        logger.info("Deleted article '%s' for user '%s'", title, user_id)

    async def delete_articles(self, user_id: str) -> None:
        _require(user_id, "missing ID")
        await self._store.delete_all(user_id)
        logger.info("Deleted all articles for user '%s'", user_id)
