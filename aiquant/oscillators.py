"""Momentum-style oscillators: Momentum, RSI, MACD and the Stochastic oscillator."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from aiquant.core import Price
from aiquant.moving_average import EMA


def _check_period(period: int, name: str = "period") -> None:
    if period < 1:
        raise ValueError(f"{name} must be at least 1")


class MomentumMode(Enum):
    """How momentum compares the latest close with the one ``period`` bars ago."""

    DIFFERENCE = "difference"
    RATE = "rate"


class Momentum:
    """Momentum over a lookback of ``period`` bars.

    ``DIFFERENCE``: ``close_t - close_{t-period}``.
    ``RATE``: ``close_t / close_{t-period} - 1`` (0 when the old close is 0).
    Returns ``None`` until the close from ``period`` bars ago is known.
    """

    def __init__(self, period: int = 10, mode: MomentumMode = MomentumMode.DIFFERENCE) -> None:
        _check_period(period)
        self._period = period
        self._mode = MomentumMode(mode)
        self._buf: deque[float] = deque()
        self._current: Optional[float] = None

    @property
    def period(self) -> int:
        return self._period

    @property
    def mode(self) -> MomentumMode:
        return self._mode

    def reset(self) -> None:
        self._buf.clear()
        self._current = None

    def update(self, close: float) -> Optional[float]:
        self._buf.append(close)
        if len(self._buf) <= self._period:
            return None
        prev = self._buf.popleft()
        if self._mode is MomentumMode.DIFFERENCE:
            self._current = close - prev
        else:
            self._current = close / prev - 1.0 if prev != 0.0 else 0.0
        return self._current

    def value(self) -> Optional[float]:
        """Last computed momentum, if any."""
        return self._current

    @staticmethod
    def compute(
        closes: Iterable[float],
        period: int = 10,
        mode: MomentumMode = MomentumMode.DIFFERENCE,
    ) -> list[Optional[float]]:
        mom = Momentum(period, mode)
        return [mom.update(c) for c in closes]


class RSI:
    """Relative Strength Index.

    The first price only sets the reference. The next ``period - 1`` price
    changes are summed and divided by ``period`` to seed the average gain and
    loss; afterwards both averages are smoothed with the latest gain.
    ``value()`` is 100 until ready or while the average loss is zero.
    """

    def __init__(self, period: int = 14) -> None:
        _check_period(period)
        self._period = period
        self.reset()

    @property
    def period(self) -> int:
        return self._period

    def reset(self) -> None:
        self._avg_gain = 0.0
        self._avg_loss = 0.0
        self._last_price = 0.0
        self._count = 0
        self._ready = False

    def update(self, price: Union[Price, float]) -> Optional[float]:
        """Feed a price; return the RSI once ready, otherwise ``None``."""
        current = price.value if isinstance(price, Price) else float(price)

        if self._count == 0:
            self._last_price = current
            self._count = 1
            return None

        delta = current - self._last_price
        gain = max(delta, 0.0)
        loss = max(-delta, 0.0)
        n = self._period

        if self._count < n:
            self._avg_gain += gain
            self._avg_loss += loss
            self._count += 1
            if self._count == n:
                self._avg_gain /= n
                self._avg_loss /= n
                self._ready = True
        else:
            self._avg_gain = (self._avg_gain * (n - 1) + gain) / n
            self._avg_loss = (self._avg_loss * (n - 1) + gain) / n

        self._last_price = current
        return self.value() if self._ready else None

    def is_ready(self) -> bool:
        return self._ready

    def value(self) -> float:
        if not self._ready or self._avg_loss == 0.0:
            return 100.0
        rs = self._avg_gain / self._avg_loss
        return 100.0 - 100.0 / (1.0 + rs)


@dataclass(frozen=True, slots=True)
class MACDValue:
    """MACD line, its signal EMA, and their difference."""

    macd: float
    signal: float
    hist: float


class MACD:
    """Moving Average Convergence/Divergence.

    ``update`` returns ``None`` until both price EMAs and the signal EMA over
    the MACD line are seeded.
    """

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9) -> None:
        _check_period(fast, "fast")
        _check_period(slow, "slow")
        _check_period(signal, "signal")
        self._fast = fast
        self._slow = slow
        self._signal = signal
        self._ema_fast = EMA(fast)
        self._ema_slow = EMA(slow)
        self._ema_signal = EMA(signal)
        self._current: Optional[MACDValue] = None

    @property
    def fast_period(self) -> int:
        return self._fast

    @property
    def slow_period(self) -> int:
        return self._slow

    @property
    def signal_period(self) -> int:
        return self._signal

    def reset(self) -> None:
        self._ema_fast.reset()
        self._ema_slow.reset()
        self._ema_signal.reset()
        self._current = None

    def update(self, close: float) -> Optional[MACDValue]:
        fast = self._ema_fast.update(close)
        slow = self._ema_slow.update(close)
        if fast is None or slow is None:
            return None
        line = fast - slow
        sig = self._ema_signal.update(line)
        if sig is None:
            return None
        self._current = MACDValue(line, sig, line - sig)
        return self._current

    @staticmethod
    def compute(
        closes: Iterable[float], fast: int = 12, slow: int = 26, signal: int = 9
    ) -> list[Optional[MACDValue]]:
        macd = MACD(fast, slow, signal)
        return [macd.update(c) for c in closes]


@dataclass(frozen=True, slots=True)
class StochOut:
    """Stochastic %K and %D."""

    k: float
    d: float


class Stochastic:
    """Stochastic oscillator.

    ``%K = 100 * (close - LL) / (HH - LL)`` over the last ``k_period`` bars,
    clamped to [0, 100], or 50 when the range is empty. ``%D`` is the SMA of
    ``%K`` over ``d_period`` values. Returns ``None`` until ``%D`` exists.
    """

    def __init__(self, k_period: int = 14, d_period: int = 3) -> None:
        _check_period(k_period, "k_period")
        _check_period(d_period, "d_period")
        self._k_period = k_period
        self._d_period = d_period
        self.reset()

    @property
    def k_period(self) -> int:
        return self._k_period

    @property
    def d_period(self) -> int:
        return self._d_period

    def reset(self) -> None:
        # Monotonic deques of (value, index): highs descending, lows ascending.
        self._highs: deque[tuple[float, int]] = deque()
        self._lows: deque[tuple[float, int]] = deque()
        self._idx = 0
        self._k_buf: deque[float] = deque()
        self._k_sum = 0.0
        self._current: Optional[StochOut] = None

    def _push(self, high: float, low: float) -> None:
        while self._highs and self._highs[-1][0] <= high:
            self._highs.pop()
        self._highs.append((high, self._idx))
        while self._lows and self._lows[-1][0] >= low:
            self._lows.pop()
        self._lows.append((low, self._idx))

    def _evict_before(self, window_start: int) -> None:
        while self._highs and self._highs[0][1] < window_start:
            self._highs.popleft()
        while self._lows and self._lows[0][1] < window_start:
            self._lows.popleft()

    def update(self, high: float, low: float, close: float) -> Optional[StochOut]:
        self._push(high, low)
        out: Optional[StochOut] = None

        if self._idx + 1 >= self._k_period:
            self._evict_before(self._idx + 1 - self._k_period)
            hh = self._highs[0][0]
            ll = self._lows[0][0]
            if hh == ll:
                k = 50.0
            else:
                k = min(max(100.0 * (close - ll) / (hh - ll), 0.0), 100.0)

            self._k_buf.append(k)
            self._k_sum += k
            if len(self._k_buf) > self._d_period:
                self._k_sum -= self._k_buf.popleft()
            if len(self._k_buf) == self._d_period:
                self._current = StochOut(k, self._k_sum / self._d_period)
                out = self._current

        self._idx += 1
        return out

    def value(self) -> Optional[StochOut]:
        """Last computed %K/%D, if any."""
        return self._current

    @staticmethod
    def compute(
        highs: Iterable[float],
        lows: Iterable[float],
        closes: Iterable[float],
        k_period: int = 14,
        d_period: int = 3,
    ) -> list[Optional[StochOut]]:
        st = Stochastic(k_period, d_period)
        return [st.update(h, l, c) for h, l, c in zip(highs, lows, closes)]