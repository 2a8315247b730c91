"""Configuration module for the Guardian RSS gateway."""

from guardian_rss.config.settings import (
    AppSettings,
    GuardianSettings,
    get_app_settings,
    resolve_guardian_settings,
)

__all__ = [
    "AppSettings",
    "GuardianSettings",
    "get_app_settings",
    "resolve_guardian_settings",
]
