# aiquant

This package provides technical indicators for quantitative finance. You can
feed each indicator one sample at a time, or run it over a whole series at
once. Both ways follow the same warm-up rules. The package needs only the
Python standard library.

## Installation

```
pip install aiquant
```

To run the tests as well:

```
pip install "aiquant[test]"
pytest
```

## Command line

```
aiquant
```

This command prints a short banner and exits with status 0. It confirms that
the package is installed.

## Core types

`aiquant.core` provides immutable market-data value types:

- `Price(value)` supports `+`, `-`, `==` and ordering.
- `Volume(value)` supports `+`.
- `Symbol(value)` turns into its string with `str()`.
- `Tick(timestamp, symbol, price, volume)`.
- `Candle(start_time, open, high, low, close, volume)`.

The timestamps are `datetime` objects.

`RingBuffer(capacity)` is a fixed-size buffer. It keeps the most recent
`capacity` items. Index 0 is the oldest item it holds. It supports these
operations:

- `push`
- `len()`
- iteration
- indexing
- `full()`

A capacity below 1 raises `ValueError`.

## Indicators

Every indicator class has the following methods:

- **Streaming**: `update(...)` returns `None` until the indicator has warmed
  up. After that it returns the current value.
- **Batch**: the static method `compute(...)` returns a list with one entry
  per input. Each entry is either `None` or a value. The bar-based `compute`
  methods stop at the shortest of the input sequences.
- `reset()` starts the indicator over.

A period below 1 raises `ValueError`.

| Module | Contents |
| --- | --- |
| `aiquant.moving_average` | `SMA`, and `EMA`, which is seeded with the SMA of the first `period` samples |
| `aiquant.bands` | `BollingerBands`, which returns `Bands(middle, upper, lower)`. `ZScore`, which returns 0.0 when the window has no spread |
| `aiquant.volatility` | `true_range`, `ATR`, and `ADX`, which returns `ADXOut(plus_di, minus_di, dx, adx)` |
| `aiquant.oscillators` | `Momentum`, with a `MomentumMode` of `DIFFERENCE` or `RATE`. `RSI`. `MACD`, which returns `MACDValue(macd, signal, hist)`. `Stochastic`, which returns `StochOut(k, d)` |

The defaults are as follows:

| Indicator | Default settings |
| --- | --- |
| `SMA` and `EMA` | period 14 |
| `BollingerBands` | period 20, `k` 2.0 |
| `ZScore` | period 20 |
| `ATR` and `ADX` | period 14 |
| `Momentum` | period 10 |
| `RSI` | period 14 |
| `MACD` | fast 12, slow 26, signal 9 |
| `Stochastic` | `k_period` 14, `d_period` 3 |

`ATR`, `ADX` and `Stochastic` take bar inputs: `update(high, low, close)`.
The others take a single value.

`RSI` works a little differently from the other indicators:

- `RSI.update` accepts either a `Price` or a number.
- `RSI` also has `is_ready()`.
- `RSI.value()` returns 100.0 before it is ready.
- `RSI` has no batch `compute`.

Streaming example:

```python
from aiquant.moving_average import SMA, EMA

sma = SMA(3)
for x in (5.0, 7.0, 9.0, -1.0):
    print(sma.update(x))   # None, None, 7.0, 5.0

print(EMA.compute([10.0, 11.0, 13.0, 12.0], 3))
```

Bar-based example:

```python
from aiquant.volatility import ATR

atr = ATR(14)
value = atr.update(101.0, 99.0, 100.5)   # None: the first bar only sets the previous close
```

## What the package does not do

The package has no volume-weighted average price indicator. It also has no
shared indicator base classes, and no wrappers that feed a `Candle` or `Tick`
to an indicator. To use these types with an indicator, pass their fields
yourself. For example, call `atr.update(c.high.value, c.low.value, c.close.value)`.

The package does not load market data, store it or fetch it.