"""Access token acquisition for the Spotify catalog client."""

from .credentials import (
    ClientCredentials,
    CredentialSource,
    DelegatedIssuance,
    TokenIssuer,
)
from .expiring import Clock, ExpiringValue
from .token_manager import DEFAULT_TOKEN_TTL, TokenManager
from .types import AccessToken, TokenGrant

__all__ = [
    "AccessToken",
    "ClientCredentials",
    "Clock",
    "CredentialSource",
    "DEFAULT_TOKEN_TTL",
    "DelegatedIssuance",
    "ExpiringValue",
    "TokenGrant",
    "TokenIssuer",
    "TokenManager",
]
