"""Application settings and runtime config resolution.

This module centralizes environment-backed defaults and resolution rules used by
the API layer and the upstream Guardian client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Guardian API env names and defaults. The GUARDIAN_* names are accepted as
# aliases so existing deployments keep working.
ENV_BASE_URL = "BASE_URL"
ENV_API_KEY = "API_KEY"
ENV_CACHE_TTL_MINUTES = "CACHE_TTL_MINUTES"
ENV_REQUEST_TIMEOUT_SECONDS = "REQUEST_TIMEOUT_SECONDS"

ENV_GUARDIAN_URL = "GUARDIAN_URL"
ENV_GUARDIAN_API_KEY = "GUARDIAN_API_KEY"
ENV_GUARDIAN_CACHE_TIME = "GUARDIAN_CACHE_TIME"

DEFAULT_BASE_URL = "https://content.guardianapis.com/"
DEFAULT_API_KEY = "test"
DEFAULT_CACHE_TTL_MINUTES = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 5

# API env names and defaults
ENV_API_HOST = "API_HOST"
ENV_API_PORT = "API_PORT"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def _clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def _first_set(env: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


@dataclass(frozen=True)
class GuardianSettings:
    base_url: str
    api_key: str
    cache_ttl_minutes: int
    request_timeout_seconds: int

    @property
    def cache_ttl_seconds(self) -> int:
        return self.cache_ttl_minutes * 60


@dataclass(frozen=True)
class APISettings:
    host: str
    port: int


@dataclass(frozen=True)
class AppSettings:
    guardian: GuardianSettings
    api: APISettings


def resolve_guardian_settings(env: Mapping[str, str] = os.environ) -> GuardianSettings:
    base_url = _first_set(env, ENV_BASE_URL, ENV_GUARDIAN_URL) or DEFAULT_BASE_URL
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"

    api_key = _first_set(env, ENV_API_KEY, ENV_GUARDIAN_API_KEY) or DEFAULT_API_KEY

    raw_ttl = _first_set(env, ENV_CACHE_TTL_MINUTES, ENV_GUARDIAN_CACHE_TIME)
    try:
        cache_ttl_minutes = _clamp(
            int(raw_ttl) if raw_ttl is not None else DEFAULT_CACHE_TTL_MINUTES,
            0,
            1440,
        )
    except ValueError:
        cache_ttl_minutes = DEFAULT_CACHE_TTL_MINUTES

    try:
        timeout_seconds = _clamp(
            int(env.get(ENV_REQUEST_TIMEOUT_SECONDS, DEFAULT_REQUEST_TIMEOUT_SECONDS)),
            1,
            60,
        )
    except ValueError:
        timeout_seconds = DEFAULT_REQUEST_TIMEOUT_SECONDS

    return GuardianSettings(
        base_url=base_url,
        api_key=api_key,
        cache_ttl_minutes=cache_ttl_minutes,
        request_timeout_seconds=timeout_seconds,
    )


def resolve_api_settings(env: Mapping[str, str] = os.environ) -> APISettings:
    host = env.get(ENV_API_HOST, DEFAULT_API_HOST)
    try:
        port = int(env.get(ENV_API_PORT, str(DEFAULT_API_PORT)))
    except ValueError:
        port = DEFAULT_API_PORT

    return APISettings(host=host, port=port)


def get_app_settings(env: Mapping[str, str] = os.environ) -> AppSettings:
    return AppSettings(
        guardian=resolve_guardian_settings(env=env),
        api=resolve_api_settings(env=env),
    )
