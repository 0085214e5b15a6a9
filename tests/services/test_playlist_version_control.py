from __future__ import annotations

import httpx
import pytest
import respx

from spotify_catalog.api import CatalogClient
from spotify_catalog.auth import TokenManager
from spotify_catalog.services import PlaylistVersionControl
from tests.factories import API

URL = f"{API}/playlists/p1"
MINIMAL = {"name": "Road Trip", "description": None, "snapshot_id": "snap-9"}


@pytest.fixture
def versions(catalog_client: CatalogClient) -> PlaylistVersionControl:
    return PlaylistVersionControl(catalog_client)


@pytest.mark.asyncio
async def test_first_check_returns_fields_and_validator(
    respx_mock: respx.Router, versions: PlaylistVersionControl
) -> None:
    route = respx_mock.get(URL).mock(
        return_value=httpx.Response(200, json=MINIMAL, headers={"ETag": '"e1"'}),
    )

    result = await versions.has_playlist_changed("p1")

    assert route.calls.last.request.url.params["fields"] == "name,description,snapshot_id"
    assert result.resource_id == "p1"
    assert result.validator == '"e1"'
    assert result.has_changed
    assert result.updated_fields is not None
    assert result.updated_fields.snapshot_id == "snap-9"


@pytest.mark.asyncio
async def test_unchanged_playlist_reports_no_updates(
    respx_mock: respx.Router, versions: PlaylistVersionControl
) -> None:
    respx_mock.get(URL).mock(return_value=httpx.Response(304, headers={"ETag": '"e1"'}))

    result = await versions.has_playlist_changed("p1", '"e1"')

    assert not result.has_changed
    assert result.updated_fields is None
    assert result.validator == '"e1"'


@pytest.mark.asyncio
async def test_market_is_sent_with_version_check(
    respx_mock: respx.Router, token_manager: TokenManager, http_client: httpx.AsyncClient
) -> None:
    client = CatalogClient(token_manager, market="ch", http_client=http_client)
    route = respx_mock.get(URL).mock(
        return_value=httpx.Response(200, json=MINIMAL, headers={"ETag": '"e2"'}),
    )

    await PlaylistVersionControl(client).has_playlist_changed("p1", '"e1"')

    assert route.calls.last.request.url.params["market"] == "CH"
