"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum

from blog_api.domain.exceptions import InvalidRequestError


@dataclass
class Article:
    """A titled piece of text owned by one user namespace.

    ``timestamp`` is assigned by the store at write time and is only used
    for ordering; the title alone identifies the article within its namespace.
    """

    title: str
    content: str
    timestamp: datetime | None = None

    def stamped(self, when: datetime | None = None) -> "Article":
        """Return a copy carrying a fresh server-side timestamp."""
        return replace(self, timestamp=when or datetime.now(timezone.utc))


class SortOrder(str, Enum):
    """Ordering applied to a namespace listing."""

    UNORDERED = ""
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, raw: "SortOrder | str | None") -> "SortOrder":
        """Map a raw ``sort`` value onto a member; only ``asc``/``desc`` are accepted."""
        if raw is None:
            return cls.UNORDERED
        if isinstance(raw, cls):
            return raw
        if raw in (cls.ASCENDING.value, cls.DESCENDING.value):
            return cls(raw)
        raise InvalidRequestError("invalid sort parameter")

    def apply(self, articles: list[Article]) -> list[Article]:
        if self is SortOrder.UNORDERED:
            return articles
        return sorted(
            articles,
            key=lambda a: a.timestamp or datetime.min.replace(tzinfo=timezone.utc),
            reverse=self is SortOrder.DESCENDING,
        )
