"""Exceptions raised along the feed pipeline.

The route maps each of these to an XML error document:

- ``SectionValidationError`` -> 422 ``invalid``
- ``FetchError`` / ``RenderError`` -> 500 ``error``
"""


class FeedError(Exception):
    """Base class for every failure the feed route knows how to report."""


class SectionValidationError(FeedError):
    """The requested section name is malformed."""


class FetchError(FeedError):
    """The upstream API could not be queried."""


class UpstreamTransportError(FetchError):
    """Network failure, timeout, non-2xx status or unreadable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RenderError(FeedError):
    """Upstream data could not be turned into an RSS document."""
