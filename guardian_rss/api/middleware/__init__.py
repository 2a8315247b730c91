"""API Middleware."""

from guardian_rss.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
