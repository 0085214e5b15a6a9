from __future__ import annotations

from typing import Generic, TypeVar

from .common import SpotifyBaseModel

ItemT = TypeVar("ItemT")


class PagingResult(SpotifyBaseModel, Generic[ItemT]):
    """One page of a paginated collection."""

    items: list[ItemT]
    limit: int
    offset: int
    total: int
    href: str | None = None
    next: str | None = None
    previous: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None or self.offset + len(self.items) < self.total
