"""Concrete article store backed by SQLite through SQLAlchemy.

Layout mirrors a bucketed key-value engine: ``buckets`` holds one row per
user namespace, ``entries`` holds ``(bucket, key) -> value`` where the key is
the UTF-8 title and the value the encoded article record.
"""

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog_api.application.interfaces import ArticleStore
from blog_api.domain.entities import Article, SortOrder
from blog_api.domain.exceptions import (
    StorageFailureError,
    UnknownKeyError,
    UnknownNamespaceError,
)
from blog_api.infrastructure.database.base import Base
from blog_api.infrastructure.database.codec import ArticleCodec, ArticleCodecError
from blog_api.infrastructure.database.models import BucketModel, EntryModel
from blog_api.infrastructure.database.session import (
    BEGIN_MODE_OPTION,
    READ_BEGIN_MODE,
    WRITE_BEGIN_MODE,
)

logger = logging.getLogger(__name__)


def _key(value: str) -> bytes:
    return value.encode("utf-8")


@contextmanager
def _storage_errors(operation: str, namespace: str) -> Iterator[None]:
    """Translate engine and codec failures into StorageFailureError."""
    try:
        yield
    except (SQLAlchemyError, ArticleCodecError) as exc:
        raise StorageFailureError(operation, namespace, str(exc)) from exc


class SQLAlchemyArticleStore(ArticleStore):
    """Implements the ArticleStore port using SQLAlchemy async sessions.

    Reads open a deferred (read-only) transaction and see one snapshot.
    Writes take the in-process writer lock and an immediate transaction, so
    the existence check and the mutation can never interleave with another
    writer.
    """

    def __init__(self, engine: AsyncEngine, codec: ArticleCodec | None = None):
        self._engine = engine
        self._codec = codec or ArticleCodec()
        self._readers = async_sessionmaker(
            engine.execution_options(**{BEGIN_MODE_OPTION: READ_BEGIN_MODE}),
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._writers = async_sessionmaker(
            engine.execution_options(**{BEGIN_MODE_OPTION: WRITE_BEGIN_MODE}),
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._write_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create the bucket and entry tables if they are missing."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self._engine.dispose()

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    async def _raise_missing(session: AsyncSession, namespace: str, title: str) -> None:
        """Raise the not-found variant matching the namespace state.

        An empty bucket reads exactly like an absent one.
        """
        bucket = _key(namespace)
        populated = await session.scalar(
            select(EntryModel.key).where(EntryModel.bucket == bucket).limit(1)
        )
        if populated is None:
            logger.debug("Unknown namespace '%s'", namespace)
            raise UnknownNamespaceError(namespace)
        logger.debug("Unknown title '%s' in namespace '%s'", title, namespace)
        raise UnknownKeyError(namespace, title)

    # ── Port implementation ─────────────────────────────────────────

    async def put(self, namespace: str, article: Article) -> Article:
        bucket = _key(namespace)
        with _storage_errors("put", namespace):
            async with self._write_lock:
                async with self._writers.begin() as session:
                    stored = article.stamped()
                    value = self._codec.encode(stored)

                    exists = await session.scalar(
                        select(BucketModel.name).where(BucketModel.name == bucket)
                    )
                    if exists is None:
                        session.add(BucketModel(name=bucket))
                        await session.flush()

                    stmt = sqlite_insert(EntryModel).values(
                        bucket=bucket, key=_key(stored.title), value=value
                    )
                    stmt = stmt.on_conflict_do_update(
                        index_elements=[EntryModel.bucket, EntryModel.key],
                        set_={"value": stmt.excluded.value},
                    )
                    await session.execute(stmt)
        return stored

    async def get(self, namespace: str, title: str) -> Article:
        with _storage_errors("get", namespace):
            async with self._readers.begin() as session:
                value = await session.scalar(
                    select(EntryModel.value).where(
                        EntryModel.bucket == _key(namespace),
                        EntryModel.key == _key(title),
                    )
                )
                if value is None:
                    await self._raise_missing(session, namespace, title)
            return self._codec.decode(value)

    async def get_all(
        self, namespace: str, order: SortOrder | str = SortOrder.UNORDERED
    ) -> list[Article]:
        order = SortOrder.parse(order)
        with _storage_errors("get_all", namespace):
            async with self._readers.begin() as session:
                result = await session.scalars(
                    select(EntryModel.value)
                    .where(EntryModel.bucket == _key(namespace))
                    .order_by(EntryModel.key)
                )
                values = result.all()
            articles = [self._codec.decode(value) for value in values]

        if not articles:
            logger.debug("Unknown namespace '%s'", namespace)
            raise UnknownNamespaceError(namespace)
        return order.apply(articles)

    async def delete(self, namespace: str, title: str) -> None:
        with _storage_errors("delete", namespace):
            async with self._write_lock:
                async with self._writers.begin() as session:
                    result = await session.execute(
                        delete(EntryModel)
                        .where(
                            EntryModel.bucket == _key(namespace),
                            EntryModel.key == _key(title),
                        )
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        await self._raise_missing(session, namespace, title)

    async def delete_all(self, namespace: str) -> None:
        bucket = _key(namespace)
        with _storage_errors("delete_all", namespace):
            async with self._write_lock:
                async with self._writers.begin() as session:
                    await session.execute(
                        delete(EntryModel)
                        .where(EntryModel.bucket == bucket)
                        .execution_options(synchronize_session=False)
                    )
                    result = await session.execute(
                        delete(BucketModel)
                        .where(BucketModel.name == bucket)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        logger.debug("Unknown namespace '%s'", namespace)
                        raise UnknownNamespaceError(namespace)
