from __future__ import annotations

import time
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]


class ExpiringValue(Generic[T]):
    """Single slot holding a value until a time-to-live elapses.

    Expiry is checked lazily on read; an expired value stays stored until the
    next ``set`` overwrites it.
    """

    __slots__ = ("_value", "_expires_at", "_clock")

    def __init__(self, clock: Clock | None = None) -> None:
        self._value: T | None = None
        self._expires_at: float | None = None
        self._clock = clock or time.monotonic

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def expires_at(self) -> float | None:
        return self._expires_at

    def set(self, value: T, ttl: float) -> None:
        self._value = value
        self._expires_at = self._clock() + ttl

    def get(self) -> T | None:
        if self._expires_at is None or self._clock() >= self._expires_at:
            return None
        return self._value

    def expires_in(self) -> float | None:
        """Seconds until expiry, or ``None`` when nothing live is stored."""

        if self._expires_at is None:
            return None
        remaining = self._expires_at - self._clock()
        return remaining if remaining > 0 else None

    def __repr__(self) -> str:
        return f"ExpiringValue(live={self.get() is not None}, expires_at={self._expires_at!r})"


__all__ = ["Clock", "ExpiringValue"]
