"""Typed Web API payloads."""

from .models import (
    Album,
    AlbumType,
    Artist,
    Market,
    MinimalPlaylist,
    PagingResult,
    Playlist,
    PlaylistTrack,
    SearchResult,
    SearchType,
    Track,
)

__all__ = [
    "Album",
    "AlbumType",
    "Artist",
    "Market",
    "MinimalPlaylist",
    "PagingResult",
    "Playlist",
    "PlaylistTrack",
    "SearchResult",
    "SearchType",
    "Track",
]
