from .article_store import SQLAlchemyArticleStore

__all__ = [
    "SQLAlchemyArticleStore",
]
