"""Abstract store interface (port) — defines the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Article, SortOrder


class ArticleStore(ABC):
    """Port for per-user article persistence.

    Every method runs as one atomic transaction. Namespaces are created by
    ``put`` only; reads never create them.
    """

    @abstractmethod
    async def put(self, namespace: str, article: Article) -> Article:
        """Stamp and store an article, overwriting any entry with the same title."""
        ...

    @abstractmethod
    async def get(self, namespace: str, title: str) -> Article:
        """Return the stored article or raise UnknownNamespaceError / UnknownKeyError."""
        ...

    @abstractmethod
    async def get_all(
        self, namespace: str, order: SortOrder | str = SortOrder.UNORDERED
    ) -> list[Article]:
        """Return every article in the namespace, optionally sorted by timestamp."""
        ...

    @abstractmethod
    async def delete(self, namespace: str, title: str) -> None:
        """Remove one article."""
        ...

    @abstractmethod
    async def delete_all(self, namespace: str) -> None:
        """Remove the namespace together with all of its articles."""
        ...
