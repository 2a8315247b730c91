"""
RSS 2.0 Renderer

Turns Guardian articles into a pretty-printed RSS 2.0 document. Text and
attribute values are escaped by ElementTree on serialization, so titles or
summaries containing ``<``, ``>``, ``&`` or quotes always produce well-formed
XML that parses back to the original text. Characters XML 1.0 forbids
(C0 controls other than tab, newline and carriage return, lone surrogates,
U+FFFE/U+FFFF) are stripped before insertion.
"""

import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Sequence

from guardian_rss.api.errors import RenderError
from guardian_rss.api.schemas.feeds import Article

ATOM_NS = "http://www.w3.org/2005/Atom"
MEDIA_NS = "http://search.yahoo.com/mrss/"

ET.register_namespace("atom", ATOM_NS)
ET.register_namespace("media", MEDIA_NS)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

CHANNEL_TITLE = "Guardian RSS Feed"
CHANNEL_LINK = "https://www.theguardian.com"
EMPTY_CHANNEL_TITLE = "No Articles Found"
NO_DESCRIPTION = "No description available"

# Complement of the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def xml_safe(text: str) -> str:
    """Drop characters that cannot appear in an XML 1.0 document."""
    return _INVALID_XML_CHARS.sub("", text)


def format_rss_date(value: datetime) -> str:
    """Format *value* as an RFC 822 date, e.g. ``Sun, 15 Jun 2025 10:00:00 +0000``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc))


def serialize(root: ET.Element) -> str:
    """Serialize *root* with an XML declaration and two-space indentation."""
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def _add_text(parent: ET.Element, tag: str, text: str) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = xml_safe(text)
    return child


def _add_item(channel: ET.Element, article: Article) -> None:
    item = ET.SubElement(channel, "item")
    _add_text(item, "title", article.title)
    _add_text(item, "link", article.url)
    _add_text(item, "description", article.trail_text or NO_DESCRIPTION)
    _add_text(item, "category", article.section_name)
    _add_text(item, "pubDate", format_rss_date(article.published_at))
    _add_text(item, "guid", article.url)
    if article.thumbnail:
        ET.SubElement(item, f"{{{MEDIA_NS}}}thumbnail", {"url": xml_safe(article.thumbnail)})


def render_empty_feed(section: str) -> str:
    """Render the degraded channel used when a section has no articles."""
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _add_text(channel, "title", EMPTY_CHANNEL_TITLE)
    _add_text(channel, "link", CHANNEL_LINK)
    _add_text(channel, "description", f"No articles available for the section: {section}")
    return serialize(rss)


def render_feed(section: str, articles: Sequence[Article], self_url: str) -> str:
    """
    Render *articles* as an RSS 2.0 feed.

    Each article becomes one ``<item>`` in input order; the renderer never
    re-sorts. An empty sequence yields the "No Articles Found" channel.

    Args:
        section: Validated section name, used in the channel description.
        articles: Articles as returned by the upstream API.
        self_url: URL of the current request, used for the ``atom:link``.

    Raises:
        RenderError: The document could not be built from the given data.
    """
    if not articles:
        return render_empty_feed(section)

    try:
        rss = ET.Element("rss", {"version": "2.0"})
        channel = ET.SubElement(rss, "channel")
        _add_text(channel, "title", CHANNEL_TITLE)
        _add_text(channel, "link", CHANNEL_LINK)
        _add_text(channel, "description", f"Latest {section} from The Guardian")
        ET.SubElement(channel, f"{{{ATOM_NS}}}link", {"href": xml_safe(self_url), "rel": "self"})

        for article in articles:
            _add_item(channel, article)

        return serialize(rss)
    except (TypeError, ValueError, AttributeError) as e:
        raise RenderError(f"Unable to render RSS feed for section '{section}': {e}") from e
