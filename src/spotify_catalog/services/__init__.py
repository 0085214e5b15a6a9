"""Endpoint-level services built on the catalog client."""

from .catalog import CatalogService
from .playlists import PlaylistVersionControl, VersionCheckResult

__all__ = [
    "CatalogService",
    "PlaylistVersionControl",
    "VersionCheckResult",
]
