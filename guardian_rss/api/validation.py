"""Section name validation."""

from __future__ import annotations

import re

from guardian_rss.api.errors import SectionValidationError

SECTION_PATTERN = re.compile(r"[a-z-]+")
SECTION_ERROR_MESSAGE = "The section-name must only contain lowercase letters and hyphens."


class Section(str):
    """A section name that has passed validation."""


def validate_section(raw: str | None) -> Section:
    """Return *raw* as a ``Section`` or raise ``SectionValidationError``.

    Only lowercase ASCII letters and hyphens are accepted; empty input fails.
    """
    if not raw or not SECTION_PATTERN.fullmatch(raw):
        raise SectionValidationError(SECTION_ERROR_MESSAGE)
    return Section(raw)
