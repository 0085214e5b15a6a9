from __future__ import annotations

import asyncio

import httpx

from spotify_catalog.auth.credentials import CredentialSource
from spotify_catalog.auth.expiring import Clock, ExpiringValue
from spotify_catalog.auth.types import AccessToken
from spotify_catalog.utils import get_logger


logger = get_logger(__name__)

DEFAULT_TOKEN_TTL = 3600


class TokenManager:
    """Caches the current access token and coalesces concurrent refreshes.

    A live cached token is returned without any coordination. On a miss, the
    first caller starts one issuance task and every caller that misses while it
    runs awaits that same task, so the credential source is hit at most once per
    refresh. Callers await the task through :func:`asyncio.shield`; cancelling
    one caller never cancels the issuance the others are waiting on.
    """

    def __init__(
        self,
        source: CredentialSource,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock | None = None,
        default_ttl: int = DEFAULT_TOKEN_TTL,
    ) -> None:
        self._source = source
        self._cache: ExpiringValue[str] = ExpiringValue(clock)
        self._default_ttl = default_ttl
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._inflight: asyncio.Task[str] | None = None

    @property
    def source(self) -> CredentialSource:
        return self._source

    async def get_token(self) -> str:
        token = self._cache.get()
        if token is not None:
            return token

        task = self._inflight
        if task is None or task.done():
            task = asyncio.get_running_loop().create_task(self._issue())
            task.add_done_callback(self._on_issue_done)
            self._inflight = task
        else:
            logger.debug("Joining in-flight token issuance")
        return await asyncio.shield(task)

    async def access_token(self) -> AccessToken:
        """Return the current token with its expiry on the manager's clock."""

        token = await self.get_token()
        expires_on = self._cache.expires_at
        return AccessToken(token=token, expires_on=expires_on or 0.0)

    def invalidate(self, token: str | None = None) -> None:
        """Expire the cached token so the next call issues a new one.

        When ``token`` is given, the cache is only expired if it still holds that
        token; a newer token obtained meanwhile is kept.
        """

        current = self._cache.get()
        if current is None:
            return
        if token is not None and token != current:
            return
        self._cache.set(current, 0)
        logger.info("Access token invalidated")

    async def close(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> TokenManager:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ------------------------------------------------------------- Internals

    async def _issue(self) -> str:
        logger.debug("Requesting new access token", source=type(self._source).__name__)
        grant = await self._source.issue(self._get_http_client())
        ttl = grant.expires_in if grant.expires_in is not None else self._default_ttl
        self._cache.set(grant.token, ttl)
        logger.info("Access token issued", expires_in=ttl)
        return grant.token

    def _on_issue_done(self, task: asyncio.Task[str]) -> None:
        if self._inflight is task:
            self._inflight = None
        if task.cancelled():
            return
        # Mark the exception retrieved even when every waiter has gone away.
        error = task.exception()
        if error is not None:
            logger.warning("Access token issuance failed", error=str(error))

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(30.0))
            self._owns_http_client = True
        return self._http_client


__all__ = ["DEFAULT_TOKEN_TTL", "TokenManager"]
