from .article import ArticleCreate, ArticleUpdate

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
]
