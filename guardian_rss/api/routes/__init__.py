"""API Routes."""

from guardian_rss.api.routes.feeds import router as feeds_router

__all__ = ["feeds_router"]
