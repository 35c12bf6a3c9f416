from .article import ArticleCreate, ArticleResponse

__all__ = [
    "ArticleCreate",
    "ArticleResponse",
]
