"""Builders for Guardian search payloads used across tests."""


def make_result(
    title: str = "Match report",
    url: str = "https://www.theguardian.com/sport/2025/jun/15/match-report",
    section_name: str = "Sport",
    published: str = "2025-06-15T10:00:00Z",
    trail_text: str | None = "A summary.",
    thumbnail: str | None = "https://media.guim.co.uk/thumb.jpg",
) -> dict:
    fields: dict = {}
    if trail_text is not None:
        fields["trailText"] = trail_text
    if thumbnail is not None:
        fields["thumbnail"] = thumbnail
    return {
        "id": url.removeprefix("https://www.theguardian.com/"),
        "type": "article",
        "sectionId": "sport",
        "sectionName": section_name,
        "webPublicationDate": published,
        "webTitle": title,
        "webUrl": url,
        "apiUrl": url.replace("www.theguardian.com", "content.guardianapis.com"),
        "fields": fields,
    }


def make_payload(results: list[dict]) -> dict:
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": len(results),
            "startIndex": 1,
            "pageSize": 10,
            "currentPage": 1,
            "pages": 1,
            "orderBy": "newest",
            "results": results,
        }
    }
