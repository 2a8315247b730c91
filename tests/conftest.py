"""Shared fixtures: sample Guardian search payloads."""

import pytest

from helpers import make_payload, make_result


@pytest.fixture
def two_article_payload() -> dict:
    return make_payload(
        [
            make_result(
                title="Late winner seals title",
                url="https://www.theguardian.com/sport/2025/jun/15/late-winner",
                published="2025-06-15T10:00:00Z",
            ),
            make_result(
                title="Rain stops play",
                url="https://www.theguardian.com/sport/2025/jun/14/rain-stops-play",
                published="2025-06-14T18:30:00Z",
                trail_text=None,
                thumbnail=None,
            ),
        ]
    )
