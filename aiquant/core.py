"""Market data value types and a fixed-capacity ring buffer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

Timestamp = datetime

T = TypeVar("T")


@dataclass(frozen=True, order=True, slots=True)
class Price:
    """A price level."""

    value: float

    def __add__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.value + other.value)

    def __sub__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.value - other.value)


@dataclass(frozen=True, slots=True)
class Volume:
    """A traded quantity."""

    value: float

    def __add__(self, other: Volume) -> Volume:
        if not isinstance(other, Volume):
            return NotImplemented
        return Volume(self.value + other.value)


@dataclass(frozen=True, slots=True)
class Symbol:
    """An instrument identifier such as a ticker."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Tick:
    """A single trade: when, what, at which price and how much."""

    timestamp: Timestamp
    symbol: Symbol
    price: Price
    volume: Volume


@dataclass(frozen=True, slots=True)
class Candle:
    """An OHLCV bar starting at ``start_time``."""

    start_time: Timestamp
    open: Price
    high: Price
    low: Price
    close: Price
    volume: Volume


class RingBuffer(Generic[T]):
    """Fixed-capacity buffer that keeps the most recent ``capacity`` items.

    Index 0 is the oldest retained item.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._data: deque[T] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._data.maxlen or 0

    def push(self, value: T) -> None:
        """Append a value, overwriting the oldest one when full."""
        self._data.append(value)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def full(self) -> bool:
        """True once the buffer holds ``capacity`` items."""
        return len(self._data) == self.capacity