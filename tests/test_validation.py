"""Tests for section name validation."""

import pytest

from guardian_rss.api.errors import SectionValidationError
from guardian_rss.api.validation import Section, validate_section


@pytest.mark.parametrize("raw", ["sport", "world", "uk-news", "-", "commentisfree", "a"])
def test_accepts_lowercase_letters_and_hyphens(raw):
    section = validate_section(raw)

    assert section == raw
    assert isinstance(section, Section)


@pytest.mark.parametrize(
    "raw",
    ["", None, "Sport", "Sport!", "sport1", "uk_news", "uk news", " sport", "sport\n", "spört", "../etc"],
)
def test_rejects_everything_else(raw):
    with pytest.raises(SectionValidationError) as exc_info:
        validate_section(raw)

    assert "must only contain lowercase letters and hyphens" in str(exc_info.value)
