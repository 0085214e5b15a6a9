from __future__ import annotations

from dataclasses import dataclass

import httpx

from spotify_catalog.api.client import CatalogClient
from spotify_catalog.auth import CredentialSource, TokenManager
from spotify_catalog.config import Settings, SettingsManager
from spotify_catalog.services import CatalogService, PlaylistVersionControl
from spotify_catalog.utils import get_logger


logger = get_logger(__name__)


@dataclass(slots=True)
class SpotifyServices:
    client: CatalogClient
    catalog: CatalogService
    playlists: PlaylistVersionControl

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> SpotifyServices:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def build_services(
    settings: Settings | None = None,
    *,
    credentials: CredentialSource | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SpotifyServices:
    """Wire the token manager, client and services together.

    ``credentials`` overrides the client-credentials pair from settings, e.g.
    with a :class:`~spotify_catalog.auth.DelegatedIssuance`.
    """

    settings = settings or SettingsManager().load()
    if credentials is None:
        if not settings.is_configured:
            raise ValueError(
                "Spotify client credentials are not configured; set "
                "SPOTIFY_CATALOG_CLIENT_ID and SPOTIFY_CATALOG_CLIENT_SECRET"
            )
        credentials = settings.credentials()

    owned = http_client is None
    shared = http_client or httpx.AsyncClient(timeout=httpx.Timeout(settings.timeout))
    token_manager = TokenManager(credentials, http_client=shared)
    client = CatalogClient(
        token_manager,
        market=settings.market,
        base_url=settings.api_base_url,
        http_client=shared,
        timeout=settings.timeout,
    )
    if owned:
        client.adopt_http_client()
    logger.debug(
        "Catalog services initialised",
        source=type(credentials).__name__,
        market=client.market,
    )
    return SpotifyServices(
        client=client,
        catalog=CatalogService(client),
        playlists=PlaylistVersionControl(client),
    )


__all__ = ["SpotifyServices", "build_services"]
