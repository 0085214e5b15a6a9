from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class SpotifyBaseModel(BaseModel):
    """Base class for Web API payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        frozen=True,
    )


class SpotifyResource(SpotifyBaseModel):
    """Shared identity of catalog objects."""

    id: str
    uri: str


class Market(StrEnum):
    CH = "ch"
    DE = "de"
    US = "us"


class Image(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class Followers(SpotifyBaseModel):
    total: int


class PublicUser(SpotifyBaseModel):
    id: str
    uri: str
    display_name: str | None = None
    images: list[Image] | None = None
    followers: Followers | None = None
