"""Rolling-window statistics: Bollinger Bands and Z-Score."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError("period must be at least 1")


class _RollingStats:
    """Running mean and population standard deviation over a fixed window."""

    def __init__(self, period: int) -> None:
        _check_period(period)
        self.period = period
        self._buf: deque[float] = deque()
        self._sum = 0.0
        self._sumsq = 0.0

    def clear(self) -> None:
        self._buf.clear()
        self._sum = 0.0
        self._sumsq = 0.0

    def push(self, x: float) -> Optional[tuple[float, float]]:
        """Add a sample; return ``(mean, stddev)`` once the window is full."""
        self._buf.append(x)
        self._sum += x
        self._sumsq += x * x
        if len(self._buf) > self.period:
            old = self._buf.popleft()
            self._sum -= old
            self._sumsq -= old * old
        if len(self._buf) != self.period:
            return None
        mean = self._sum / self.period
        # Guard against tiny negative values from floating-point cancellation.
        var = max(self._sumsq / self.period - mean * mean, 0.0)
        return mean, math.sqrt(var)


@dataclass(frozen=True, slots=True)
class Bands:
    """Middle (SMA), upper and lower Bollinger bands."""

    middle: float
    upper: float
    lower: float


class BollingerBands:
    """Bollinger Bands: SMA(period) plus and minus ``k`` standard deviations.

    ``update`` returns ``None`` until ``period`` samples have been seen.
    """

    def __init__(self, period: int = 20, k: float = 2.0) -> None:
        self._stats = _RollingStats(period)
        self._k = k
        self._current: Optional[Bands] = None

    @property
    def period(self) -> int:
        return self._stats.period

    @property
    def k(self) -> float:
        return self._k

    def reset(self) -> None:
        self._stats.clear()
        self._current = None

    def update(self, x: float) -> Optional[Bands]:
        stats = self._stats.push(x)
        if stats is None:
            return None
        mean, stdev = stats
        self._current = Bands(mean, mean + self._k * stdev, mean - self._k * stdev)
        return self._current

    def value(self) -> Optional[Bands]:
        """Last computed bands, if any."""
        return self._current

    @staticmethod
    def compute(
        values: Iterable[float], period: int = 20, k: float = 2.0
    ) -> list[Optional[Bands]]:
        bb = BollingerBands(period, k)
        return [bb.update(v) for v in values]


class ZScore:
    """Rolling z-score ``(x - mean) / stddev`` over the last ``period`` samples.

    Returns ``None`` during warmup and ``0.0`` when the window has no spread.
    """

    def __init__(self, period: int = 20) -> None:
        self._stats = _RollingStats(period)
        self._current: Optional[float] = None

    @property
    def period(self) -> int:
        return self._stats.period

    def reset(self) -> None:
        self._stats.clear()
        self._current = None

    def update(self, x: float) -> Optional[float]:
        stats = self._stats.push(x)
        if stats is None:
            return None
        mean, sd = stats
        self._current = (x - mean) / sd if sd > 0.0 else 0.0
        return self._current

    def value(self) -> Optional[float]:
        """Last computed z-score, if any."""
        return self._current

    @staticmethod
    def compute(values: Iterable[float], period: int = 20) -> list[Optional[float]]:
        zs = ZScore(period)
        return [zs.update(v) for v in values]