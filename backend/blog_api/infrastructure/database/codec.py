"""Storage encoding for article records.

Records are stored as UTF-8 JSON objects (``title``, ``content``,
``timestamp`` in ISO-8601). The format is private to the store; HTTP
representations are produced separately by the presentation layer.
"""

from pydantic import TypeAdapter, ValidationError

from blog_api.domain.entities import Article


class ArticleCodecError(ValueError):
    """Raised when a stored record cannot be encoded or decoded."""


class ArticleCodec:
    """Converts Article entities to and from their stored byte form."""

    def __init__(self) -> None:
        self._adapter = TypeAdapter(Article)

    def encode(self, article: Article) -> bytes:
        try:
            return self._adapter.dump_json(article)
        except (TypeError, ValueError) as exc:
            raise ArticleCodecError(f"cannot encode article '{article.title}': {exc}") from exc

    def decode(self, data: bytes) -> Article:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as exc:
            raise ArticleCodecError(f"cannot decode stored article: {exc}") from exc
