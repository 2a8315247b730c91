"""
Guardian Article Fetcher

Queries the Guardian content API ``search`` endpoint for the newest articles
of a section and parses the results into ``Article`` models.
"""

from typing import Any, Optional

import requests
from pydantic import ValidationError

from guardian_rss.api.errors import RenderError, UpstreamTransportError
from guardian_rss.api.schemas.feeds import Article
from guardian_rss.utils.logging_config import get_logger

logger = get_logger(__name__)

PAGE_SIZE = 10
USER_AGENT = "GuardianRSS/1.0"


class ArticleFetcher:
    """Single-attempt client for the Guardian ``search`` endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 5,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    @property
    def search_url(self) -> str:
        return f"{self.base_url}search"

    def build_params(self, section: str) -> dict[str, Any]:
        return {
            "section": section,
            "api-key": self.api_key,
            "format": "json",
            "show-fields": "all",
            "page-size": PAGE_SIZE,
            "order-by": "newest",
        }

    def fetch(self, section: str) -> list[Article]:
        """
        Fetch the newest articles for *section*.

        Args:
            section: A validated section name.

        Returns:
            Articles in upstream order. An empty list means the API answered
            but had no results for the section.

        Raises:
            UpstreamTransportError: Network failure, timeout, non-2xx status
                or a body that is not JSON.
            RenderError: A result is missing required fields.
        """
        logger.info("Requesting articles from Guardian", section=section, url=self.search_url)

        try:
            response = self._session.get(
                self.search_url,
                params=self.build_params(section),
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            raise UpstreamTransportError(
                f"Guardian API timed out after {self.timeout_seconds}s"
            ) from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise UpstreamTransportError(
                f"Guardian API returned HTTP {status_code}",
                status_code=status_code,
            ) from e
        except requests.RequestException as e:
            raise UpstreamTransportError(f"Guardian API request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamTransportError("Guardian API returned a non-JSON body") from e

        results = _extract_results(payload)
        if not results:
            logger.warning("No articles found for section", section=section)
            return []

        logger.info("Response from Guardian", section=section, result_count=len(results))

        try:
            return [Article.model_validate(result) for result in results]
        except ValidationError as e:
            raise RenderError(f"Malformed article in Guardian response: {e.error_count()} error(s)") from e


def _extract_results(payload: Any) -> list:
    if not isinstance(payload, dict):
        return []
    body = payload.get("response")
    if not isinstance(body, dict):
        return []
    results = body.get("results")
    return results if isinstance(results, list) else []
