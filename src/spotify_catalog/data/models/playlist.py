from __future__ import annotations

from .common import Followers, Image, PublicUser, SpotifyBaseModel, SpotifyResource
from .music import Track


class TracksReference(SpotifyBaseModel):
    href: str
    total: int


class PlaylistTrack(SpotifyBaseModel):
    added_at: str | None = None
    track: Track | None = None


class Playlist(SpotifyResource):
    name: str
    owner: PublicUser
    collaborative: bool
    description: str | None = None
    public: bool | None = None
    followers: Followers | None = None
    images: list[Image] | None = None
    snapshot_id: str
    tracks: TracksReference


class MinimalPlaylist(SpotifyBaseModel):
    """The fields compared to decide whether a playlist changed."""

    name: str
    description: str | None = None
    snapshot_id: str
