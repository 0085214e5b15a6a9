from __future__ import annotations

from typing import Mapping, TypeAlias, TypeVar

QueryValue: TypeAlias = str | int | float | bool | None
QueryParams: TypeAlias = Mapping[str, QueryValue]

MARKET_PARAM = "market"

N = TypeVar("N", int, float)


def clamp(value: N, *, minimum: N | None = None, maximum: N | None = None) -> N:
    """Bound ``value`` to ``[minimum, maximum]``; either bound may be omitted."""

    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


def normalise_market(market: str | None) -> str | None:
    """Return the uppercase region code, or ``None`` when unset."""

    if market is None:
        return None
    code = str(market).strip()
    if not code:
        return None
    if len(code) != 2 or not code.isalpha():
        raise ValueError(f"Market must be a two-letter country code, got {market!r}")
    return code.upper()


def _format_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(
    params: QueryParams | None,
    *,
    market: str | None = None,
) -> list[tuple[str, str]]:
    """Flatten query parameters for a request.

    Parameters whose value is ``None`` are left out; an empty string is a value
    and is sent. When ``market`` is set it is appended as an uppercase code.
    """

    query: list[tuple[str, str]] = [
        (key, _format_value(value))
        for key, value in (params or {}).items()
        if value is not None
    ]
    code = normalise_market(market)
    if code is not None:
        query = [(key, value) for key, value in query if key != MARKET_PARAM]
        query.append((MARKET_PARAM, code))
    return query


__all__ = [
    "MARKET_PARAM",
    "QueryParams",
    "QueryValue",
    "build_query",
    "clamp",
    "normalise_market",
]
