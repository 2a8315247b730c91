"""API Services."""

from guardian_rss.api.services.article_fetcher import ArticleFetcher
from guardian_rss.api.services.feed_cache import FeedCache, cache_key
from guardian_rss.api.services.feed_service import FeedService, get_feed_service

__all__ = [
    "ArticleFetcher",
    "FeedCache",
    "FeedService",
    "cache_key",
    "get_feed_service",
]
