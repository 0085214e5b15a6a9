from __future__ import annotations

import asyncio
from typing import Any

from spotify_catalog.auth import CredentialSource, TokenGrant


API = "https://api.spotify.com/v1"
TOKEN_URL = "https://accounts.spotify.com/api/token"


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingSource(CredentialSource):
    """Credential source that records issuances and can be held open."""

    def __init__(
        self,
        tokens: list[str] | None = None,
        *,
        expires_in: int | None = 3600,
        error: Exception | None = None,
    ) -> None:
        self.tokens = list(tokens or ["token-1", "token-2", "token-3"])
        self.expires_in = expires_in
        self.error = error
        self.calls = 0
        self.release = asyncio.Event()
        self.release.set()

    def hold(self) -> None:
        self.release.clear()

    async def issue(self, http_client: Any) -> TokenGrant:
        self.calls += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return TokenGrant(self.tokens[self.calls - 1], self.expires_in)


def make_token_payload(
    token: str = "tok1", expires_in: int = 3600, **overrides: Any
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "access_token": token,
        "token_type": "Bearer",
        "expires_in": expires_in,
        "scope": "",
    }
    payload.update(overrides)
    return payload


def make_artist_payload(artist_id: str = "artist-1", name: str = "Artist") -> dict[str, Any]:
    return {
        "id": artist_id,
        "name": name,
        "uri": f"spotify:artist:{artist_id}",
    }


def make_album_payload(
    album_id: str = "album-1",
    name: str = "Album",
    release_date: str | None = "2019-05-17",
) -> dict[str, Any]:
    return {
        "id": album_id,
        "name": name,
        "album_type": "album",
        "artists": [make_artist_payload()],
        "images": [{"url": "https://i.scdn.co/image/1", "height": 640, "width": 640}],
        "release_date": release_date,
        "release_date_precision": "day",
        "uri": f"spotify:album:{album_id}",
    }


def make_track_payload(track_id: str = "track-1", name: str = "Track") -> dict[str, Any]:
    return {
        "id": track_id,
        "name": name,
        "popularity": 50,
        "duration_ms": 215000,
        "track_number": 1,
        "disc_number": 1,
        "explicit": False,
        "artists": [make_artist_payload()],
        "album": make_album_payload(),
        "external_ids": {"isrc": "USUM71900001"},
        "uri": f"spotify:track:{track_id}",
    }


def make_playlist_payload(
    playlist_id: str = "playlist-1",
    snapshot_id: str = "snap-1",
) -> dict[str, Any]:
    return {
        "id": playlist_id,
        "name": "Road Trip",
        "owner": {
            "id": "user-1",
            "display_name": "User",
            "uri": "spotify:user:user-1",
        },
        "public": True,
        "collaborative": False,
        "description": "Songs for the road",
        "followers": {"total": 12},
        "images": [],
        "snapshot_id": snapshot_id,
        "tracks": {"href": f"{API}/playlists/{playlist_id}/tracks", "total": 2},
        "uri": f"spotify:playlist:{playlist_id}",
    }


def make_paging_payload(items: list[Any], *, total: int | None = None) -> dict[str, Any]:
    return {
        "items": items,
        "limit": 10,
        "offset": 0,
        "total": len(items) if total is None else total,
    }
