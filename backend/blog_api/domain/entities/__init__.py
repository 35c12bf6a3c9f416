from .article import Article, SortOrder

__all__ = [
    "Article",
    "SortOrder",
]
