"""API Schemas - Pydantic models for upstream payloads and responses."""

from guardian_rss.api.schemas.feeds import Article, ArticleFields, ServiceIndex

__all__ = [
    "Article",
    "ArticleFields",
    "ServiceIndex",
]
