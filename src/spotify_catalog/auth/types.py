"""Authentication type definitions."""

from __future__ import annotations

from typing import NamedTuple


class AccessToken(NamedTuple):
    """A bearer token together with the clock reading at which it expires."""

    token: str
    """The token string."""

    expires_on: float
    """Expiry, on the token manager's clock."""


class TokenGrant(NamedTuple):
    """Result of a single token issuance."""

    token: str
    expires_in: int | None = None
    """Lifetime in seconds; ``None`` lets the token manager apply its default."""


__all__ = ["AccessToken", "TokenGrant"]
