"""Async client for the Spotify Web API catalog."""

from spotify_catalog.api import CatalogClient, ConditionalFetchResult
from spotify_catalog.auth import (
    ClientCredentials,
    DelegatedIssuance,
    ExpiringValue,
    TokenGrant,
    TokenManager,
)
from spotify_catalog.bootstrap import SpotifyServices, build_services
from spotify_catalog.errors import (
    APIError,
    AuthError,
    DecodeError,
    RequestError,
    SpotifyAPIError,
    TransportError,
)
from spotify_catalog.services import (
    CatalogService,
    PlaylistVersionControl,
    VersionCheckResult,
)
from spotify_catalog.utils import (
    ErrorDescriptor,
    ErrorSeverity,
    LoggingOptions,
    configure_logging,
    describe_exception,
)

__version__ = "0.3.0"

__all__ = [
    "APIError",
    "AuthError",
    "CatalogClient",
    "CatalogService",
    "ClientCredentials",
    "ConditionalFetchResult",
    "DecodeError",
    "DelegatedIssuance",
    "ErrorDescriptor",
    "ErrorSeverity",
    "ExpiringValue",
    "LoggingOptions",
    "PlaylistVersionControl",
    "RequestError",
    "SpotifyAPIError",
    "SpotifyServices",
    "TokenGrant",
    "TokenManager",
    "TransportError",
    "VersionCheckResult",
    "build_services",
    "configure_logging",
    "describe_exception",
]
