"""XML error documents returned alongside every non-200 response."""

import xml.etree.ElementTree as ET

from fastapi import Response

from guardian_rss.api.services.rss_renderer import serialize, xml_safe
from guardian_rss.utils.logging_config import get_logger

logger = get_logger(__name__)

RSS_MEDIA_TYPE = "application/rss+xml"


def render_error(message: str, status: str = "error", code: int = 500) -> str:
    """Render ``<response>`` with code, status, message and an empty content."""
    root = ET.Element("response")
    ET.SubElement(root, "code").text = str(code)
    ET.SubElement(root, "status").text = xml_safe(status)
    ET.SubElement(root, "message").text = xml_safe(message)
    ET.SubElement(root, "content").text = ""
    return serialize(root)


def error_response(message: str, status: str = "error", code: int = 500) -> Response:
    """Log the failure and wrap its XML document in a response with status *code*."""
    logger.error(
        "An error occurred while fetching the RSS feed",
        message=message,
        status=status,
        code=code,
    )
    return Response(
        content=render_error(message, status=status, code=code),
        status_code=code,
        media_type=RSS_MEDIA_TYPE,
    )
