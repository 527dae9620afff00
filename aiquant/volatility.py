"""Average True Range and Average Directional Index with Wilder smoothing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError("period must be at least 1")


def true_range(high: float, low: float, prev_close: float) -> float:
    """``max(high - low, |high - prev_close|, |low - prev_close|)``, never negative."""
    return max(max(0.0, high - low), abs(high - prev_close), abs(low - prev_close))


def _directional_movement(
    high: float, low: float, prev_high: float, prev_low: float
) -> tuple[float, float]:
    """Return ``(+DM, -DM)`` for a bar relative to the previous one."""
    up_move = high - prev_high
    down_move = prev_low - low
    plus_dm = up_move if up_move > down_move and up_move > 0.0 else 0.0
    minus_dm = down_move if down_move > up_move and down_move > 0.0 else 0.0
    return plus_dm, minus_dm


def _wilder(prev: float, x: float, period: int) -> float:
    return (prev * (period - 1.0) + x) / period


class ATR:
    """Average True Range.

    The first bar only provides the previous close. The first ATR is the
    mean of the next ``period`` true ranges; afterwards Wilder smoothing
    applies: ``ATR = (ATR_prev * (period - 1) + TR) / period``.
    """

    def __init__(self, period: int = 14) -> None:
        _check_period(period)
        self._period = period
        self.reset()

    @property
    def period(self) -> int:
        return self._period

    def reset(self) -> None:
        self._prev_close: Optional[float] = None
        self._tr_count = 0
        self._tr_sum = 0.0
        self._atr: Optional[float] = None

    def update(self, high: float, low: float, close: float) -> Optional[float]:
        if self._prev_close is None:
            self._prev_close = close
            return None

        tr = true_range(high, low, self._prev_close)
        self._prev_close = close

        if self._atr is None:
            self._tr_sum += tr
            self._tr_count += 1
            if self._tr_count == self._period:
                self._atr = self._tr_sum / self._period
            return self._atr

        self._atr = _wilder(self._atr, tr, self._period)
        return self._atr

    def value(self) -> Optional[float]:
        """Last ATR, if seeded."""
        return self._atr

    @staticmethod
    def compute(
        highs: Iterable[float],
        lows: Iterable[float],
        closes: Iterable[float],
        period: int = 14,
    ) -> list[Optional[float]]:
        atr = ATR(period)
        return [atr.update(h, l, c) for h, l, c in zip(highs, lows, closes)]


@dataclass(frozen=True, slots=True)
class ADXOut:
    """Directional indicators and ADX for one bar."""

    plus_di: float
    minus_di: float
    dx: float
    adx: float


class ADX:
    """Average Directional Index.

    Bar 0 provides the previous bar. Bars 1..N seed the smoothed TR and
    directional movement; from bar N a DX is produced each bar. The first
    ADX is the mean of the first N DX values (bar 2N-1); afterwards it is
    Wilder-smoothed. ``update`` returns ``None`` until ADX is available.
    """

    def __init__(self, period: int = 14) -> None:
        _check_period(period)
        self._period = period
        self.reset()

    @property
    def period(self) -> int:
        return self._period

    def reset(self) -> None:
        self._prev: Optional[tuple[float, float, float]] = None

        self._seed_count = 0
        self._tr_sum = 0.0
        self._pdm_sum = 0.0
        self._ndm_sum = 0.0

        self._di_ready = False
        self._atr = 0.0
        self._pdm_s = 0.0
        self._ndm_s = 0.0

        self._dx_seed_count = 0
        self._dx_sum = 0.0
        self._adx: Optional[float] = None

    def update(self, high: float, low: float, close: float) -> Optional[ADXOut]:
        if self._prev is None:
            self._prev = (high, low, close)
            return None

        prev_high, prev_low, prev_close = self._prev
        tr = true_range(high, low, prev_close)
        pdm, ndm = _directional_movement(high, low, prev_high, prev_low)
        self._prev = (high, low, close)

        n = self._period
        if not self._di_ready:
            self._tr_sum += tr
            self._pdm_sum += pdm
            self._ndm_sum += ndm
            self._seed_count += 1
            if self._seed_count < n:
                return None
            self._atr = self._tr_sum / n
            self._pdm_s = self._pdm_sum / n
            self._ndm_s = self._ndm_sum / n
            self._di_ready = True
        else:
            self._atr = _wilder(self._atr, tr, n)
            self._pdm_s = _wilder(self._pdm_s, pdm, n)
            self._ndm_s = _wilder(self._ndm_s, ndm, n)

        if self._atr > 0.0:
            plus_di = 100.0 * self._pdm_s / self._atr
            minus_di = 100.0 * self._ndm_s / self._atr
        else:
            plus_di = minus_di = 0.0

        denom = plus_di + minus_di
        dx = 100.0 * abs(plus_di - minus_di) / denom if denom > 0.0 else 0.0

        if self._adx is None:
            self._dx_sum += dx
            self._dx_seed_count += 1
            if self._dx_seed_count < n:
                return None
            self._adx = self._dx_sum / n
        else:
            self._adx = _wilder(self._adx, dx, n)

        return ADXOut(plus_di, minus_di, dx, self._adx)

    @staticmethod
    def compute(
        highs: Iterable[float],
        lows: Iterable[float],
        closes: Iterable[float],
        period: int = 14,
    ) -> list[Optional[ADXOut]]:
        adx = ADX(period)
        return [adx.update(h, l, c) for h, l, c in zip(highs, lows, closes)]