from .common import (
    Followers,
    Image,
    Market,
    PublicUser,
    SpotifyBaseModel,
    SpotifyResource,
)
from .music import Album, AlbumType, Artist, Track
from .paging import PagingResult
from .playlist import MinimalPlaylist, Playlist, PlaylistTrack, TracksReference
from .search import SearchResult, SearchType

__all__ = [
    "Album",
    "AlbumType",
    "Artist",
    "Followers",
    "Image",
    "Market",
    "MinimalPlaylist",
    "PagingResult",
    "Playlist",
    "PlaylistTrack",
    "PublicUser",
    "SearchResult",
    "SearchType",
    "SpotifyBaseModel",
    "SpotifyResource",
    "Track",
    "TracksReference",
]
