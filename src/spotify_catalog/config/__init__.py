"""Configuration helpers for the Spotify catalog client."""

from .settings import DEFAULT_API_BASE_URL, DEFAULT_TOKEN_URL, Settings, SettingsManager

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TOKEN_URL",
    "Settings",
    "SettingsManager",
]
