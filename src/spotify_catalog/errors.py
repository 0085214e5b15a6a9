from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    DECODE = "decode"
    UNKNOWN = "unknown"


class AuthErrorKind(str, Enum):
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    DELEGATE_FAILURE = "delegate_failure"


class RequestErrorKind(str, Enum):
    NO_DATA = "no_data"


@dataclass(slots=True)
class SpotifyAPIError(Exception):
    message: str
    category: ErrorCategory = ErrorCategory.UNKNOWN
    status_code: int | None = None
    retry_after: str | None = None
    inner_error: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    @property
    def recovery_suggestion(self) -> str | None:
        if self.category is ErrorCategory.AUTHENTICATION:
            return "Verify the client ID and secret, or the delegated token issuer."
        if self.category is ErrorCategory.PERMISSION:
            return "The token does not grant access to this resource."
        if self.category is ErrorCategory.RATE_LIMIT:
            if self.retry_after:
                return f"Spotify throttled the request. Retry after {self.retry_after} seconds."
            return "Spotify throttled the request. Retry later."
        if self.category is ErrorCategory.NETWORK:
            return "Check your internet connection and try again."
        if self.category is ErrorCategory.NOT_FOUND:
            return "Check the resource identifier."
        if self.category is ErrorCategory.DECODE:
            return "The response did not match the expected shape; the API may have changed."
        return None

    @property
    def is_retriable(self) -> bool:
        if self.category in {ErrorCategory.RATE_LIMIT, ErrorCategory.NETWORK}:
            return True
        if self.status_code and 500 <= self.status_code <= 599:
            return True
        return False


class AuthError(SpotifyAPIError):
    """Access token issuance failed."""

    def __init__(
        self,
        kind: AuthErrorKind,
        message: str | None = None,
        *,
        status_code: int | None = None,
        inner_error: Exception | None = None,
    ) -> None:
        category = (
            ErrorCategory.NETWORK
            if kind is AuthErrorKind.TRANSPORT_FAILURE
            else ErrorCategory.AUTHENTICATION
        )
        super().__init__(
            message=message or f"Token issuance failed: {kind.value}",
            category=category,
            status_code=status_code,
            inner_error=inner_error,
        )
        self.kind = kind


class TransportError(SpotifyAPIError):
    """Network-level failure; the underlying httpx error is kept as ``inner_error``."""

    def __init__(self, message: str, *, inner_error: Exception | None = None) -> None:
        super().__init__(
            message=message,
            category=ErrorCategory.NETWORK,
            inner_error=inner_error,
        )


class RequestError(SpotifyAPIError):
    def __init__(
        self,
        kind: RequestErrorKind = RequestErrorKind.NO_DATA,
        message: str = "Transport returned neither a response nor an error",
    ) -> None:
        super().__init__(message=message)
        self.kind = kind


class DecodeError(SpotifyAPIError):
    def __init__(
        self,
        type_name: str,
        path: str | None = None,
        *,
        detail: str | None = None,
        inner_error: Exception | None = None,
    ) -> None:
        location = f" at '{path}'" if path else ""
        message = f"Failed to decode {type_name}{location}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(
            message=message,
            category=ErrorCategory.DECODE,
            inner_error=inner_error,
        )
        self.type_name = type_name
        self.path = path


class APIError(SpotifyAPIError):
    """Non-success HTTP status returned by the Web API."""


__all__ = [
    "APIError",
    "AuthError",
    "AuthErrorKind",
    "DecodeError",
    "ErrorCategory",
    "RequestError",
    "RequestErrorKind",
    "SpotifyAPIError",
    "TransportError",
]
