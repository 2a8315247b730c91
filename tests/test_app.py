"""Tests for the assembled application and its middleware."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from guardian_rss.api.main import create_app, main
from guardian_rss.api.services import feed_service
from guardian_rss.api.services.feed_cache import FeedCache
from guardian_rss.api.services.feed_service import FeedService, get_feed_service
from guardian_rss.config.settings import get_app_settings


class _EmptyFetcher:
    def fetch(self, section):
        return []


def _client() -> TestClient:
    app = create_app()
    service = FeedService(fetcher=_EmptyFetcher(), cache=FeedCache())
    app.dependency_overrides[get_feed_service] = lambda: service
    return TestClient(app)


def test_request_id_header_is_set():
    response = _client().get("/sport")

    assert response.status_code == 200
    assert len(response.headers["X-Request-ID"]) == 8


def test_request_id_header_on_error_responses():
    response = _client().get("/Sport!")

    assert response.status_code == 422
    assert "X-Request-ID" in response.headers


def test_feed_service_singleton_reads_settings(monkeypatch):
    monkeypatch.setenv("BASE_URL", "https://example.test/api")
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("CACHE_TTL_MINUTES", "2")
    feed_service.reset_feed_service()

    try:
        service = get_feed_service()

        assert service is get_feed_service()
        assert service.fetcher.search_url == "https://example.test/api/search"
        assert service.fetcher.api_key == "secret"
        assert service.cache.ttl_seconds == 120
    finally:
        feed_service.reset_feed_service()


def test_lifespan_starts_with_app_settings(monkeypatch):
    monkeypatch.setenv("CACHE_TTL_MINUTES", "3")

    with patch("guardian_rss.api.main.get_app_settings", wraps=get_app_settings) as settings_spy:
        with _client() as client:
            assert client.get("/").status_code == 200

    settings_spy.assert_called()


def test_main_runs_uvicorn_with_api_settings(monkeypatch):
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "9123")

    with patch("uvicorn.run") as run:
        main()

    run.assert_called_once()
    _, kwargs = run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9123
