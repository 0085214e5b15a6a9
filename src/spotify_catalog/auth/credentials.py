from __future__ import annotations

import abc
import base64
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from spotify_catalog.auth.types import TokenGrant
from spotify_catalog.config.settings import DEFAULT_TOKEN_URL
from spotify_catalog.errors import AuthError, AuthErrorKind
from spotify_catalog.utils import get_logger


logger = get_logger(__name__)

TokenIssuer = Callable[[], Awaitable[TokenGrant | tuple[str, int | None]]]


class TokenEndpointResponse(BaseModel):
    """Body returned by the accounts service for a client-credentials grant."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: str
    token_type: str
    expires_in: int
    scope: str | None = None


class CredentialSource(abc.ABC):
    """Something that can issue a fresh access token."""

    @abc.abstractmethod
    async def issue(self, http_client: httpx.AsyncClient) -> TokenGrant:
        """Obtain a new token. Raises :class:`AuthError` on failure."""


@dataclass(frozen=True, slots=True)
class ClientCredentials(CredentialSource):
    """Application credentials exchanged at the accounts service token endpoint."""

    client_id: str
    client_secret: str = field(repr=False)
    token_url: str = DEFAULT_TOKEN_URL

    def authorization_header(self) -> str:
        pair = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(pair).decode("ascii")

    async def issue(self, http_client: httpx.AsyncClient) -> TokenGrant:
        try:
            response = await http_client.post(
                self.token_url,
                headers={"Authorization": self.authorization_header()},
                data={"grant_type": "client_credentials"},
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "Token endpoint unreachable",
                url=self.token_url,
                error=type(exc).__name__,
            )
            raise AuthError(
                AuthErrorKind.TRANSPORT_FAILURE,
                f"Network error requesting access token: {exc}",
                inner_error=exc,
            ) from exc

        if response.status_code != 200:
            description = _error_description(response)
            logger.warning(
                "Token endpoint rejected credentials",
                status_code=response.status_code,
                description=description,
            )
            raise AuthError(
                AuthErrorKind.MALFORMED_RESPONSE,
                f"Token endpoint returned HTTP {response.status_code}: {description}",
                status_code=response.status_code,
            )

        try:
            payload = TokenEndpointResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise AuthError(
                AuthErrorKind.MALFORMED_RESPONSE,
                "Token endpoint response did not contain a usable access token",
                status_code=response.status_code,
                inner_error=exc,
            ) from exc

        logger.debug(
            "Issued client-credentials token",
            token_type=payload.token_type,
            expires_in=payload.expires_in,
        )
        return TokenGrant(payload.access_token, payload.expires_in)


@dataclass(frozen=True, slots=True)
class DelegatedIssuance(CredentialSource):
    """Token issuance handed to caller-supplied logic, e.g. a backend auth service."""

    issuer: TokenIssuer

    async def issue(self, http_client: httpx.AsyncClient) -> TokenGrant:
        try:
            result = await self.issuer()
        except AuthError:
            raise
        except Exception as exc:  # noqa: BLE001 - surface issuer failures uniformly
            raise AuthError(
                AuthErrorKind.DELEGATE_FAILURE,
                f"Delegated token issuer failed: {exc}",
                inner_error=exc,
            ) from exc

        if isinstance(result, TokenGrant):
            grant = result
        elif isinstance(result, tuple) and len(result) == 2:
            grant = TokenGrant(*result)
        else:
            raise AuthError(
                AuthErrorKind.MALFORMED_RESPONSE,
                f"Delegated token issuer returned {type(result).__name__}, "
                "expected (token, expires_in)",
            )
        if not isinstance(grant.token, str) or not grant.token:
            raise AuthError(
                AuthErrorKind.MALFORMED_RESPONSE,
                "Delegated token issuer returned an empty token",
            )
        if grant.expires_in is not None and not isinstance(grant.expires_in, int):
            raise AuthError(
                AuthErrorKind.MALFORMED_RESPONSE,
                "Delegated token issuer returned a non-integer lifetime",
            )
        return grant


def _error_description(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "no response body"
    if isinstance(body, dict):
        description = body.get("error_description") or body.get("error")
        if isinstance(description, str):
            return description
    return response.text or "no response body"


__all__ = [
    "ClientCredentials",
    "CredentialSource",
    "DelegatedIssuance",
    "TokenEndpointResponse",
    "TokenIssuer",
]
