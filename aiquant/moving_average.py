"""Simple and exponential moving averages with streaming and batch APIs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError("period must be at least 1")


class SMA:
    """Simple moving average over a sliding window of ``period`` samples.

    ``update`` returns ``None`` until the window is full.
    """

    def __init__(self, period: int = 14) -> None:
        _check_period(period)
        self._period = period
        self._buf: deque[float] = deque()
        self._sum = 0.0
        self._current: Optional[float] = None

    @property
    def period(self) -> int:
        return self._period

    def reset(self) -> None:
        self._buf.clear()
        self._sum = 0.0
        self._current = None

    def update(self, x: float) -> Optional[float]:
        self._buf.append(x)
        self._sum += x
        if len(self._buf) > self._period:
            self._sum -= self._buf.popleft()
        if len(self._buf) == self._period:
            self._current = self._sum / self._period
            return self._current
        return None

    def value(self) -> Optional[float]:
        """Last computed average, if any."""
        return self._current

    @staticmethod
    def compute(values: Iterable[float], period: int = 14) -> list[Optional[float]]:
        sma = SMA(period)
        return [sma.update(v) for v in values]


class EMA:
    """Exponential moving average seeded with the SMA of the first ``period`` samples.

    After seeding: ``ema = alpha * x + (1 - alpha) * ema_prev`` with
    ``alpha = 2 / (period + 1)``.
    """

    def __init__(self, period: int = 14) -> None:
        _check_period(period)
        self._period = period
        self._alpha = 2.0 / (period + 1.0)
        self._count = 0
        self._sum = 0.0
        self._ema: Optional[float] = None

    @property
    def period(self) -> int:
        return self._period

    @property
    def alpha(self) -> float:
        return self._alpha

    def reset(self) -> None:
        self._count = 0
        self._sum = 0.0
        self._ema = None

    def update(self, x: float) -> Optional[float]:
        if self._ema is None:
            self._sum += x
            self._count += 1
            if self._count == self._period:
                self._ema = self._sum / self._period
                return self._ema
            return None
        self._ema = self._alpha * x + (1.0 - self._alpha) * self._ema
        return self._ema

    def value(self) -> Optional[float]:
        """Last EMA value, if seeded."""
        return self._ema

    @staticmethod
    def compute(values: Iterable[float], period: int = 14) -> list[Optional[float]]:
        ema = EMA(period)
        return [ema.update(v) for v in values]