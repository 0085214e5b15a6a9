from __future__ import annotations

import pytest

from spotify_catalog.auth import ExpiringValue
from tests.factories import FakeClock


def test_empty_slot_returns_none(clock: FakeClock) -> None:
    slot: ExpiringValue[str] = ExpiringValue(clock)

    assert slot.get() is None
    assert slot.expires_at is None
    assert slot.expires_in() is None


@pytest.mark.parametrize("ttl", [1, 10, 3600])
def test_value_is_live_until_ttl_elapses(clock: FakeClock, ttl: int) -> None:
    slot: ExpiringValue[str] = ExpiringValue(clock)
    slot.set("value", ttl)

    assert slot.get() == "value"

    clock.advance(ttl - 0.001)
    assert slot.get() == "value"

    clock.advance(0.002)
    assert slot.get() is None


def test_value_expires_exactly_at_deadline(clock: FakeClock) -> None:
    slot: ExpiringValue[int] = ExpiringValue(clock)
    slot.set(42, 5)

    clock.advance(5)

    assert slot.get() is None


def test_read_does_not_evict_expired_value(clock: FakeClock) -> None:
    slot: ExpiringValue[str] = ExpiringValue(clock)
    slot.set("old", 1)
    clock.advance(2)

    assert slot.get() is None
    assert slot.expires_at == 1001.0
    # Moving the clock back shows the value is still stored.
    clock.now = 1000.5
    assert slot.get() == "old"


def test_set_overwrites_value_and_expiry(clock: FakeClock) -> None:
    slot: ExpiringValue[str] = ExpiringValue(clock)
    slot.set("first", 100)
    clock.advance(10)
    slot.set("second", 5)

    assert slot.get() == "second"
    assert slot.expires_at == clock.now + 5
    assert slot.expires_in() == pytest.approx(5)

    clock.advance(6)
    assert slot.get() is None
    assert slot.expires_in() is None


def test_non_positive_ttl_is_immediately_expired(clock: FakeClock) -> None:
    slot: ExpiringValue[str] = ExpiringValue(clock)
    slot.set("value", 0)

    assert slot.get() is None
