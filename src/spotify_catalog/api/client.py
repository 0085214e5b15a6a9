from __future__ import annotations

import time
from typing import Any, Mapping, TypeVar

import httpx

from spotify_catalog.api.conditional import (
    VALIDATOR_REQUEST_HEADER,
    VALIDATOR_RESPONSE_HEADER,
    ConditionalFetchResult,
    decode_body,
    is_not_modified,
    type_name,
)
from spotify_catalog.api.query import QueryParams, build_query, normalise_market
from spotify_catalog.auth.token_manager import TokenManager
from spotify_catalog.config.settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from spotify_catalog.errors import (
    APIError,
    ErrorCategory,
    RequestError,
    RequestErrorKind,
    TransportError,
)
from spotify_catalog.utils import get_logger, redact_headers


logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_USER_AGENT = "spotify-catalog-client"


def _map_response_to_error(response: httpx.Response) -> APIError:
    status = response.status_code
    retry_after = response.headers.get("Retry-After")
    message: str | None = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error_info = body.get("error")
        if isinstance(error_info, dict):
            message = error_info.get("message")
        elif isinstance(error_info, str):
            message = body.get("error_description") or error_info

    message = message or response.text or f"Spotify request failed with status {status}"

    category = ErrorCategory.UNKNOWN
    if status == 401:
        category = ErrorCategory.AUTHENTICATION
    elif status == 403:
        category = ErrorCategory.PERMISSION
    elif status == 404:
        category = ErrorCategory.NOT_FOUND
    elif status == 429:
        category = ErrorCategory.RATE_LIMIT

    return APIError(
        message=message,
        category=category,
        status_code=status,
        retry_after=retry_after,
    )


class CatalogClient:
    """Authenticated GET access to the Spotify Web API.

    Every request carries a bearer token from the :class:`TokenManager`, and
    the optional ``market`` is appended to every query.
    """

    def __init__(
        self,
        token_manager: TokenManager,
        *,
        market: str | None = None,
        base_url: str = DEFAULT_API_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._token_manager = token_manager
        self._market = normalise_market(market)
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._timeout = timeout
        self._user_agent = user_agent

    def adopt_http_client(self) -> None:
        """Take ownership of the injected HTTP client so ``close`` shuts it down."""

        self._owns_http_client = True

    @property
    def token_manager(self) -> TokenManager:
        return self._token_manager

    @property
    def market(self) -> str | None:
        return self._market

    @market.setter
    def market(self, value: str | None) -> None:
        self._market = normalise_market(value)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_request(
        self,
        path: str,
        *,
        token: str,
        query: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        """Assemble the outgoing GET without sending it."""

        merged: dict[str, str] = {"User-Agent": self._user_agent}
        for key, value in (headers or {}).items():
            if key.lower() == "authorization":
                logger.warning("Ignoring caller-supplied Authorization header", path=path)
                continue
            merged[key] = value
        merged["Authorization"] = f"Bearer {token}"
        return self._get_http_client().build_request(
            "GET",
            self._absolute_url(path),
            params=build_query(query, market=self._market),
            headers=merged,
        )

    async def dispatch(
        self,
        path: str,
        query: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send an authenticated GET and return the raw response.

        Raises :class:`TransportError` on network failure,
        :class:`RequestError` when the transport produced no response, and
        :class:`APIError` for HTTP error statuses. 304 is returned as is.
        """

        token = await self._token_manager.get_token()
        request = self.build_request(path, token=token, query=query, headers=headers)
        client = self._get_http_client()

        start = time.perf_counter()
        try:
            response: httpx.Response | None = await client.send(request)
        except httpx.HTTPError as exc:
            logger.warning(
                "Spotify request failed",
                method=request.method,
                url=str(request.url),
                error=type(exc).__name__,
            )
            raise TransportError(
                f"Network error communicating with Spotify: {exc}",
                inner_error=exc,
            ) from exc

        if response is None:
            logger.error("Transport returned no response", url=str(request.url))
            raise RequestError(RequestErrorKind.NO_DATA)

        logger.debug(
            "Spotify request",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            headers=redact_headers(request.headers),
        )

        if response.status_code >= 400:
            if response.status_code == 401:
                self._token_manager.invalidate(token)
            raise _map_response_to_error(response)
        return response

    async def request_model(
        self,
        path: str,
        model: type[T],
        query: QueryParams | None = None,
    ) -> T:
        response = await self.dispatch(path, query)
        return decode_body(model, response.content)

    async def fetch(
        self,
        path: str,
        model: type[T],
        validator: str | None = None,
        prevent_stale_replay: bool = True,
        *,
        query: QueryParams | None = None,
    ) -> ConditionalFetchResult[T]:
        """Conditional GET against a previously seen validator (etag).

        Returns ``data=None`` when the resource is unchanged; otherwise the
        decoded body. The returned validator is whatever the server sent and
        should be stored for the next call. A decode failure raises
        :class:`DecodeError` and is never reported as unchanged.
        """

        headers = (
            {VALIDATOR_REQUEST_HEADER: validator} if validator is not None else None
        )
        response = await self.dispatch(path, query, headers)
        response_validator = response.headers.get(VALIDATOR_RESPONSE_HEADER)

        if is_not_modified(
            response.status_code,
            response_validator,
            validator,
            prevent_stale_replay=prevent_stale_replay,
        ):
            logger.debug(
                "Resource not modified",
                path=path,
                status_code=response.status_code,
                model=type_name(model),
            )
            return ConditionalFetchResult(data=None, validator=response_validator)

        data = decode_body(model, response.content)
        return ConditionalFetchResult(data=data, validator=response_validator)

    async def close(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        await self._token_manager.close()

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()

    # ------------------------------------------------------------- Internals

    def _absolute_url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_http_client = True
        return self._http_client


__all__ = ["CatalogClient", "DEFAULT_USER_AGENT"]
