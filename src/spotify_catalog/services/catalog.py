from __future__ import annotations

from typing import Iterable, Sequence

from spotify_catalog.api.client import CatalogClient
from spotify_catalog.api.query import clamp
from spotify_catalog.data.models import (
    Album,
    AlbumType,
    Artist,
    PagingResult,
    Playlist,
    PlaylistTrack,
    SearchResult,
    SearchType,
    Track,
)
from spotify_catalog.data.models.common import SpotifyBaseModel
from spotify_catalog.utils import get_logger


logger = get_logger(__name__)

MAX_SEARCH_LIMIT = 50
MAX_ALBUM_LIMIT = 50
MAX_PLAYLIST_TRACK_LIMIT = 100
MAX_TRACK_IDS = 50


class _TrackList(SpotifyBaseModel):
    tracks: list[Track]


class _ArtistList(SpotifyBaseModel):
    artists: list[Artist]


def _join(values: Iterable[str]) -> str:
    return ",".join(str(value) for value in values)


class CatalogService:
    """Read access to tracks, albums, artists, playlists and search.

    Page sizes are clamped here; the request pipeline passes them through as is.
    """

    def __init__(self, client: CatalogClient) -> None:
        self._client = client

    @property
    def client(self) -> CatalogClient:
        return self._client

    # ------------------------------------------------------------- Search

    async def search(
        self,
        query: str,
        *,
        limit: int = 10,
        offset: int = 0,
        types: Sequence[SearchType | str] = (SearchType.TRACK,),
    ) -> SearchResult:
        if not types:
            raise ValueError("At least one search type is required")
        return await self._client.request_model(
            "/search",
            SearchResult,
            {
                "q": query,
                "type": _join(SearchType(value) for value in types),
                "limit": clamp(limit, minimum=1, maximum=MAX_SEARCH_LIMIT),
                "offset": max(offset, 0),
            },
        )

    # ------------------------------------------------------------- Tracks

    async def get_track(self, track_id: str) -> Track:
        return await self._client.request_model(f"/tracks/{track_id}", Track)

    async def get_tracks(self, track_ids: Sequence[str]) -> list[Track]:
        """Fetch several full tracks in one request (at most 50 ids)."""

        if not track_ids:
            return []
        if len(track_ids) > MAX_TRACK_IDS:
            raise ValueError(f"At most {MAX_TRACK_IDS} track ids per request")
        payload = await self._client.request_model(
            "/tracks", _TrackList, {"ids": _join(track_ids)}
        )
        return payload.tracks

    async def get_track_details(self, track: Track) -> Track:
        return await self.get_track(track.id)

    async def get_multiple_track_details(self, tracks: Sequence[Track]) -> list[Track]:
        return await self.get_tracks([track.id for track in tracks])

    # ------------------------------------------------------------- Albums

    async def get_album(self, album_id: str) -> Album:
        return await self._client.request_model(f"/albums/{album_id}", Album)

    async def get_album_details(self, album: Album) -> Album:
        """Load the full album for a simplified one."""
        return await self.get_album(album.id)

    # ------------------------------------------------------------- Artists

    async def get_artist(self, artist_id: str) -> Artist:
        return await self._client.request_model(f"/artists/{artist_id}", Artist)

    async def get_artist_albums(
        self,
        artist_id: str,
        *,
        album_types: Sequence[AlbumType | str] | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> PagingResult[Album]:
        """Simplified album objects for an artist."""

        include_groups = (
            _join(AlbumType(value) for value in album_types) if album_types else None
        )
        return await self._client.request_model(
            f"/artists/{artist_id}/albums",
            PagingResult[Album],
            {
                "limit": clamp(limit, minimum=1, maximum=MAX_ALBUM_LIMIT),
                "offset": max(offset, 0),
                "include_groups": include_groups,
            },
        )

    async def get_artist_top_tracks(self, artist_id: str) -> list[Track]:
        payload = await self._client.request_model(
            f"/artists/{artist_id}/top-tracks", _TrackList
        )
        return payload.tracks

    async def get_related_artists(self, artist_id: str) -> list[Artist]:
        payload = await self._client.request_model(
            f"/artists/{artist_id}/related-artists", _ArtistList
        )
        return payload.artists

    # ------------------------------------------------------------- Playlists

    async def get_playlist(self, playlist_id: str) -> Playlist:
        return await self._client.request_model(f"/playlists/{playlist_id}", Playlist)

    async def get_playlist_tracks(
        self,
        playlist_id: str,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> PagingResult[PlaylistTrack]:
        return await self._client.request_model(
            f"/playlists/{playlist_id}/tracks",
            PagingResult[PlaylistTrack],
            {
                "limit": clamp(limit, minimum=1, maximum=MAX_PLAYLIST_TRACK_LIMIT),
                "offset": max(offset, 0),
            },
        )


__all__ = [
    "CatalogService",
    "MAX_ALBUM_LIMIT",
    "MAX_PLAYLIST_TRACK_LIMIT",
    "MAX_SEARCH_LIMIT",
    "MAX_TRACK_IDS",
]
