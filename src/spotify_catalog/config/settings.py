from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

if TYPE_CHECKING:
    from spotify_catalog.auth.credentials import ClientCredentials

APP_NAME = "SpotifyCatalog"
ENV_PREFIX = "SPOTIFY_CATALOG_"
ENV_FILE_NAME = "settings.env"

DEFAULT_API_BASE_URL = "https://api.spotify.com/v1"
DEFAULT_TOKEN_URL = "https://accounts.spotify.com/api/token"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Client credentials and endpoint configuration for the catalog client."""

    client_id: str | None = None
    client_secret: str | None = None
    market: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    token_url: str = DEFAULT_TOKEN_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        """True when both client identifier and secret are set."""
        return bool(self.client_id and self.client_secret)

    def credentials(self) -> ClientCredentials:
        """Build a client-credentials source from the configured pair."""
        if not self.is_configured:
            raise ValueError("Client ID and client secret must both be configured")
        from spotify_catalog.auth.credentials import ClientCredentials

        return ClientCredentials(
            client_id=self.client_id or "",
            client_secret=self.client_secret or "",
            token_url=self.token_url,
        )


class SettingsManager:
    """Load and persist settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to the persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings(
            client_id=self._get_env("CLIENT_ID"),
            client_secret=self._get_env("CLIENT_SECRET"),
            market=self._get_env("MARKET"),
        )

        api_base_url = self._get_env("API_BASE_URL")
        if api_base_url:
            settings.api_base_url = api_base_url.rstrip("/")

        token_url = self._get_env("TOKEN_URL")
        if token_url:
            settings.token_url = token_url

        timeout = self._get_env("TIMEOUT")
        if timeout:
            try:
                settings.timeout = float(timeout)
            except ValueError as exc:
                raise ValueError(
                    f"{ENV_PREFIX}TIMEOUT must be a number of seconds, got {timeout!r}"
                ) from exc

        return settings

    def save(self, settings: Settings) -> None:
        """Persist configuration fields to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}CLIENT_ID={settings.client_id or ''}",
            f"{ENV_PREFIX}CLIENT_SECRET={settings.client_secret or ''}",
            f"{ENV_PREFIX}MARKET={settings.market or ''}",
            f"{ENV_PREFIX}API_BASE_URL={settings.api_base_url}",
            f"{ENV_PREFIX}TOKEN_URL={settings.token_url}",
            f"{ENV_PREFIX}TIMEOUT={settings.timeout}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None


__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TOKEN_URL",
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
