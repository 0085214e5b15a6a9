from __future__ import annotations

import asyncio
import socket
from dataclasses import dataclass
from enum import Enum

import httpx

from spotify_catalog.errors import (
    AuthError,
    AuthErrorKind,
    ErrorCategory,
    SpotifyAPIError,
)


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ErrorDescriptor:
    headline: str
    detail: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    transient: bool = False
    suggestion: str | None = None


def describe_exception(error: Exception) -> ErrorDescriptor:
    descriptor = ErrorDescriptor(
        headline="Operation failed.",
        detail=f"{type(error).__name__}: {error}",
        severity=ErrorSeverity.ERROR,
        transient=False,
    )

    api_error = _locate_api_error(error)
    if api_error is not None:
        descriptor.detail = _format_api_detail(api_error)
        descriptor.suggestion = api_error.recovery_suggestion
        descriptor.transient = api_error.is_retriable
        if api_error.is_retriable:
            descriptor.severity = ErrorSeverity.WARNING
        descriptor.headline = _api_headline(api_error)
        return descriptor

    root = _unwrap_error(error)

    if isinstance(root, httpx.TimeoutException):
        descriptor.headline = "Temporary timeout contacting Spotify."
        descriptor.detail = f"{type(root).__name__}: {root}"
        descriptor.severity = ErrorSeverity.WARNING
        descriptor.transient = True
        descriptor.suggestion = "Check your network connection and retry shortly."
        return descriptor

    if isinstance(root, asyncio.TimeoutError):
        descriptor.headline = "Operation timed out before Spotify responded."
        descriptor.detail = "asyncio.TimeoutError: Operation timed out"
        descriptor.severity = ErrorSeverity.WARNING
        descriptor.transient = True
        descriptor.suggestion = "Retry the request after verifying connectivity."
        return descriptor

    if isinstance(root, socket.gaierror):
        descriptor.headline = "DNS lookup failed while contacting Spotify."
        descriptor.detail = f"socket.gaierror: {root}"
        descriptor.severity = ErrorSeverity.WARNING
        descriptor.transient = True
        descriptor.suggestion = "Verify internet connectivity or DNS configuration."
        return descriptor

    return descriptor


def _locate_api_error(error: Exception) -> SpotifyAPIError | None:
    current: BaseException | None = error
    visited: set[int] = set()
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        if isinstance(current, SpotifyAPIError):
            return current
        current = current.__cause__ or current.__context__
    return None


def _unwrap_error(error: Exception) -> BaseException:
    current: BaseException = error
    visited: set[int] = set()
    while True:
        visited.add(id(current))
        inner: BaseException | None = None
        if isinstance(current, SpotifyAPIError) and current.inner_error is not None:
            inner = current.inner_error
        elif current.__cause__ is not None:
            inner = current.__cause__
        elif current.__context__ is not None:
            inner = current.__context__
        if inner is None or id(inner) in visited:
            return current
        current = inner


def _api_headline(error: SpotifyAPIError) -> str:
    if isinstance(error, AuthError):
        match error.kind:
            case AuthErrorKind.TRANSPORT_FAILURE:
                return "Could not reach the Spotify token endpoint."
            case AuthErrorKind.DELEGATE_FAILURE:
                return "The delegated token issuer reported an error."
            case _:
                return "Spotify did not issue an access token."
    match error.category:
        case ErrorCategory.RATE_LIMIT:
            return "Spotify throttled the request."
        case ErrorCategory.NETWORK:
            return "Network issue contacting Spotify."
        case ErrorCategory.AUTHENTICATION:
            return "Spotify rejected the access token."
        case ErrorCategory.PERMISSION:
            return "The access token lacks permission for this resource."
        case ErrorCategory.NOT_FOUND:
            return "The requested Spotify resource does not exist."
        case ErrorCategory.DECODE:
            return "Spotify returned an unexpected response."
        case _:
            return "Spotify request failed."


def _format_api_detail(error: SpotifyAPIError) -> str:
    if error.status_code:
        return f"HTTP {error.status_code}: {error}"
    return str(error)


__all__ = [
    "ErrorDescriptor",
    "ErrorSeverity",
    "describe_exception",
]
