from __future__ import annotations

import pytest

from spotify_catalog.api.query import build_query, clamp, normalise_market
from spotify_catalog.data.models import Market


def test_region_appended_and_absent_values_dropped() -> None:
    query = build_query({"q": "abc", "limit": None}, market="de")

    assert query == [("q", "abc"), ("market", "DE")]


def test_empty_string_is_kept() -> None:
    assert build_query({"q": "", "offset": 0}) == [("q", ""), ("offset", "0")]


def test_no_market_means_no_market_param() -> None:
    assert build_query({"limit": 5}) == [("limit", "5")]
    assert build_query(None) == []


def test_client_market_replaces_caller_market() -> None:
    query = build_query({"market": "us", "q": "x"}, market="ch")

    assert query == [("q", "x"), ("market", "CH")]


def test_booleans_are_lowercase() -> None:
    assert build_query({"public": True, "collaborative": False}) == [
        ("public", "true"),
        ("collaborative", "false"),
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("de", "DE"), (" Us ", "US"), ("", None), (None, None)],
)
def test_normalise_market(raw: str | None, expected: str | None) -> None:
    assert normalise_market(raw) == expected


@pytest.mark.parametrize("raw", ["deu", "d", "1a"])
def test_normalise_market_rejects_non_country_codes(raw: str) -> None:
    with pytest.raises(ValueError):
        normalise_market(raw)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, 1), (1, 1), (25, 25), (50, 50), (500, 50), (-3, 1)],
)
def test_clamp(value: int, expected: int) -> None:
    assert clamp(value, minimum=1, maximum=50) == expected


def test_clamp_with_single_bound() -> None:
    assert clamp(500, maximum=100) == 100
    assert clamp(-1, minimum=0) == 0
    assert clamp(7) == 7


def test_market_enum_is_accepted() -> None:
    assert build_query({}, market=Market.CH) == [("market", "CH")]
