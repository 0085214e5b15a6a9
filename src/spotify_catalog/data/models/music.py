from __future__ import annotations

from enum import StrEnum

from .common import Image, SpotifyResource
from .paging import PagingResult


class AlbumType(StrEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"


class Artist(SpotifyResource):
    """Artist object; ``popularity``, ``genres`` and ``images`` only on full objects."""

    name: str
    popularity: int | None = None
    genres: list[str] | None = None
    images: list[Image] | None = None


class Album(SpotifyResource):
    name: str
    album_type: AlbumType
    artists: list[Artist]
    images: list[Image]
    release_date: str | None = None
    release_date_precision: str | None = None
    # Full album object only
    external_ids: dict[str, str] | None = None
    genres: list[str] | None = None
    label: str | None = None
    popularity: int | None = None
    tracks: PagingResult[Track] | None = None

    @property
    def release_year(self) -> str | None:
        if not self.release_date:
            return None
        return self.release_date.split("-", 1)[0]


class Track(SpotifyResource):
    name: str
    duration_ms: int
    track_number: int
    disc_number: int
    explicit: bool
    artists: list[Artist]
    popularity: int | None = None
    album: Album | None = None
    external_ids: dict[str, str] | None = None


Album.model_rebuild()
Track.model_rebuild()
