"""Feed Service — cache-wrapped fetch + render for one section.

Composes the ``ArticleFetcher`` (blocking, run in a worker thread) and the
RSS renderer behind a ``FeedCache`` so repeated requests for the same section
within the TTL are served without calling the Guardian API.
"""

import asyncio
from typing import Optional

from guardian_rss.api.services.article_fetcher import ArticleFetcher
from guardian_rss.api.services.feed_cache import FeedCache, cache_key
from guardian_rss.api.services.rss_renderer import render_feed
from guardian_rss.api.validation import Section
from guardian_rss.config.settings import GuardianSettings, resolve_guardian_settings
from guardian_rss.utils.logging_config import get_logger

logger = get_logger(__name__)


class FeedService:
    """Owns the feed cache and the upstream client."""

    def __init__(self, fetcher: ArticleFetcher, cache: FeedCache) -> None:
        self.fetcher = fetcher
        self.cache = cache

    @classmethod
    def from_settings(cls, settings: GuardianSettings) -> "FeedService":
        return cls(
            fetcher=ArticleFetcher(
                base_url=settings.base_url,
                api_key=settings.api_key,
                timeout_seconds=settings.request_timeout_seconds,
            ),
            cache=FeedCache(ttl_seconds=settings.cache_ttl_seconds),
        )

    async def build_feed(self, section: Section, self_url: str) -> str:
        """Fetch and render a fresh feed, bypassing the cache."""
        articles = await asyncio.to_thread(self.fetcher.fetch, section)
        return render_feed(section, articles, self_url)

    async def get_feed(self, section: Section, self_url: str) -> str:
        """Return the RSS document for *section*, from cache when still live."""

        async def compute() -> str:
            logger.info("Building RSS feed", section=section)
            return await self.build_feed(section, self_url)

        return await self.cache.get_or_compute(cache_key(section), compute)


_feed_service: Optional[FeedService] = None


def get_feed_service() -> FeedService:
    """Get the feed service singleton."""
    global _feed_service  # noqa: PLW0603
    if _feed_service is None:
        _feed_service = FeedService.from_settings(resolve_guardian_settings())
    return _feed_service


def reset_feed_service() -> None:
    """Drop the singleton so the next call re-reads settings (for tests)."""
    global _feed_service  # noqa: PLW0603
    _feed_service = None
