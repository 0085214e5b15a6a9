from __future__ import annotations

from typing import Final, Mapping

_SENSITIVE_HEADERS: Final[frozenset[str]] = frozenset(
    {"authorization", "proxy-authorization", "cookie", "set-cookie"}
)


def mask_secret(value: str | None, *, visible: int = 4) -> str:
    """Return ``value`` with all but the last few characters hidden."""

    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return f"{'*' * 8}{value[-visible:]}"


def redact_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Copy headers for logging with credentials masked."""

    if not headers:
        return {}
    redacted: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            scheme, _, credential = str(value).partition(" ")
            if credential:
                redacted[key] = f"{scheme} {mask_secret(credential)}"
            else:
                redacted[key] = mask_secret(scheme)
            continue
        redacted[key] = str(value)
    return redacted


__all__ = ["mask_secret", "redact_headers"]
