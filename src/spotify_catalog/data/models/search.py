from __future__ import annotations

from enum import StrEnum

from .common import SpotifyBaseModel
from .music import Album, Artist, Track
from .paging import PagingResult
from .playlist import Playlist


class SearchType(StrEnum):
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"


class SearchResult(SpotifyBaseModel):
    tracks: PagingResult[Track] | None = None
    albums: PagingResult[Album] | None = None
    artists: PagingResult[Artist] | None = None
    playlists: PagingResult[Playlist | None] | None = None
