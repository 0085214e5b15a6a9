from __future__ import annotations

from dataclasses import dataclass

from spotify_catalog.api.client import CatalogClient
from spotify_catalog.data.models import MinimalPlaylist
from spotify_catalog.utils import get_logger


logger = get_logger(__name__)

VERSION_FIELDS = "name,description,snapshot_id"


@dataclass(frozen=True, slots=True)
class VersionCheckResult:
    """Outcome of checking a playlist against its last known etag.

    ``updated_fields`` is ``None`` when nothing changed. Persist ``validator``
    and pass it to the next check either way.
    """

    resource_id: str
    validator: str | None
    updated_fields: MinimalPlaylist | None

    @property
    def has_changed(self) -> bool:
        return self.updated_fields is not None


class PlaylistVersionControl:
    """Detects playlist changes without downloading unchanged playlists.

    Stale-replay protection is on: a 200 echoing the etag we sent counts as
    unchanged. That also hides a genuine change if the server ever reuses an
    etag, which is accepted in exchange for ignoring caches that replay full
    responses.
    """

    def __init__(self, client: CatalogClient) -> None:
        self._client = client

    async def has_playlist_changed(
        self,
        playlist_id: str,
        validator: str | None = None,
        *,
        prevent_stale_replay: bool = True,
    ) -> VersionCheckResult:
        result = await self._client.fetch(
            f"/playlists/{playlist_id}",
            MinimalPlaylist,
            validator,
            prevent_stale_replay,
            query={"fields": VERSION_FIELDS},
        )
        logger.debug(
            "Checked playlist version",
            playlist_id=playlist_id,
            changed=result.changed,
            had_validator=validator is not None,
        )
        return VersionCheckResult(
            resource_id=playlist_id,
            validator=result.validator,
            updated_fields=result.data,
        )


__all__ = ["PlaylistVersionControl", "VERSION_FIELDS", "VersionCheckResult"]
