"""Section feed API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from guardian_rss.api.errors import FetchError, RenderError, SectionValidationError
from guardian_rss.api.schemas.feeds import ServiceIndex
from guardian_rss.api.services.error_responder import RSS_MEDIA_TYPE, error_response
from guardian_rss.api.services.feed_service import FeedService, get_feed_service
from guardian_rss.api.validation import validate_section
from guardian_rss.utils.logging_config import bind_context, get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["feeds"])


@router.get("/", response_model=ServiceIndex)
async def index() -> ServiceIndex:
    """Service index and health check."""
    return ServiceIndex(service="guardian-rss", status="healthy", usage="GET /{section}")


@router.get(
    "/{section}",
    response_class=Response,
    responses={
        200: {"content": {RSS_MEDIA_TYPE: {}}, "description": "RSS 2.0 feed"},
        422: {"content": {RSS_MEDIA_TYPE: {}}, "description": "Invalid section name"},
        500: {"content": {RSS_MEDIA_TYPE: {}}, "description": "Upstream or rendering failure"},
    },
)
async def section_feed(
    section: str,
    request: Request,
    feed_service: FeedService = Depends(get_feed_service),
) -> Response:
    """Get the latest Guardian articles of *section* as an RSS 2.0 feed.

    Feeds are cached in memory per section; the first request for a section
    calls the Guardian API, later ones within the TTL return instantly.
    """
    try:
        valid_section = validate_section(section)
    except SectionValidationError as e:
        return error_response(str(e), status="invalid", code=422)

    bind_context(section=valid_section)

    try:
        # Self link omits the query string; the cached feed is shared by all clients
        self_url = str(request.url.replace(query=""))
        feed = await feed_service.get_feed(valid_section, self_url=self_url)
    except FetchError as e:
        logger.warning("Upstream fetch failed", section=valid_section, error=str(e))
        return error_response(f"Unable to fetch RSS feed: {e}")
    except RenderError as e:
        return error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected error while building feed", section=valid_section)
        return error_response(str(e) or e.__class__.__name__)

    return Response(content=feed, status_code=200, media_type=RSS_MEDIA_TYPE)
