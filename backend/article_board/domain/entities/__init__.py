from .article import Article, REQUIRED_FIELDS, validate_article_fields

__all__ = [
    "Article",
    "REQUIRED_FIELDS",
    "validate_article_fields",
]
