"""Authenticated request pipeline and conditional fetch for the Web API."""

from .client import CatalogClient
from .conditional import ConditionalFetchResult, decode_body, is_not_modified
from .query import build_query, clamp, normalise_market

__all__ = [
    "CatalogClient",
    "ConditionalFetchResult",
    "build_query",
    "clamp",
    "decode_body",
    "is_not_modified",
    "normalise_market",
]
