"""Tests for environment-backed settings resolution."""

from guardian_rss.config.settings import (
    DEFAULT_API_PORT,
    DEFAULT_BASE_URL,
    DEFAULT_CACHE_TTL_MINUTES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    get_app_settings,
    resolve_guardian_settings,
)


def test_defaults_when_env_is_empty():
    settings = resolve_guardian_settings(env={})

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.cache_ttl_minutes == DEFAULT_CACHE_TTL_MINUTES
    assert settings.cache_ttl_seconds == 600
    assert settings.request_timeout_seconds == DEFAULT_REQUEST_TIMEOUT_SECONDS


def test_primary_names():
    settings = resolve_guardian_settings(
        env={
            "BASE_URL": "https://example.test/api",
            "API_KEY": "secret",
            "CACHE_TTL_MINUTES": "3",
            "REQUEST_TIMEOUT_SECONDS": "2",
        }
    )

    assert settings.base_url == "https://example.test/api/"
    assert settings.api_key == "secret"
    assert settings.cache_ttl_seconds == 180
    assert settings.request_timeout_seconds == 2


def test_guardian_aliases():
    settings = resolve_guardian_settings(
        env={
            "GUARDIAN_URL": "https://content.guardianapis.com/",
            "GUARDIAN_API_KEY": "legacy",
            "GUARDIAN_CACHE_TIME": "15",
        }
    )

    assert settings.api_key == "legacy"
    assert settings.cache_ttl_minutes == 15


def test_primary_names_win_over_aliases():
    settings = resolve_guardian_settings(env={"API_KEY": "new", "GUARDIAN_API_KEY": "old"})

    assert settings.api_key == "new"


def test_invalid_numbers_fall_back_to_defaults():
    settings = resolve_guardian_settings(
        env={"CACHE_TTL_MINUTES": "ten", "REQUEST_TIMEOUT_SECONDS": "soon"}
    )

    assert settings.cache_ttl_minutes == DEFAULT_CACHE_TTL_MINUTES
    assert settings.request_timeout_seconds == DEFAULT_REQUEST_TIMEOUT_SECONDS


def test_numbers_are_clamped():
    settings = resolve_guardian_settings(
        env={"CACHE_TTL_MINUTES": "-5", "REQUEST_TIMEOUT_SECONDS": "600"}
    )

    assert settings.cache_ttl_minutes == 0
    assert settings.request_timeout_seconds == 60


def test_app_settings_bundle_api_settings():
    settings = get_app_settings(env={"API_PORT": "not-a-port", "API_HOST": "127.0.0.1"})

    assert settings.api.host == "127.0.0.1"
    assert settings.api.port == DEFAULT_API_PORT
    assert settings.guardian.base_url == DEFAULT_BASE_URL
