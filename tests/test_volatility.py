import math

import pytest

from aiquant.volatility import ADX, ADXOut, ATR, true_range


def test_true_range_pinned_values():
    assert true_range(10.5, 9.0, 9.0) == pytest.approx(1.5)
    assert true_range(11.0, 9.0, 9.5) == pytest.approx(2.0)
    assert true_range(10.5, 9.5, 10.0) == pytest.approx(1.0)
    # gap up: previous close far below the bar
    assert true_range(20.0, 19.0, 10.0) == pytest.approx(10.0)


def test_atr_warmup_then_yields_values():
    atr = ATR(3)
    assert atr.update(10, 9, 9.5) is None
    assert atr.update(11, 9.4, 10.5) is None
    assert atr.update(12, 10.0, 11.0) is None
    assert atr.update(12.5, 11.5, 12.0) is not None


def test_atr_seed_is_average_of_first_true_ranges():
    atr = ATR(3)
    assert atr.update(10, 9, 9.0) is None
    assert atr.update(10.5, 9.0, 9.5) is None
    assert atr.update(11.0, 9.0, 10.0) is None
    first = atr.update(10.5, 9.5, 10.0)
    assert first == pytest.approx((1.5 + 2.0 + 1.0) / 3.0)


def test_atr_wilder_update_matches_recurrence():
    atr = ATR(3)
    atr.update(10, 9, 9.5)
    atr.update(11, 10, 10.5)  # TR 1.5
    atr.update(12, 10, 11.0)  # TR 2.0
    first = atr.update(12, 11, 11.5)  # TR 1.0
    assert first == pytest.approx(1.5)
    nxt = atr.update(13, 11.5, 12.5)  # TR 1.5
    assert nxt == pytest.approx((1.5 * 2 + 1.5) / 3)
    big = atr.update(20, 12.5, 19.0)  # TR 7.5
    assert big == pytest.approx((1.5 * 2 + 7.5) / 3)


def test_atr_batch_equals_incremental():
    h = [10, 11, 12, 13, 14, 15, 16, 15, 14, 13]
    l = [9, 10, 11, 12, 13, 14, 15, 14, 13, 12]
    c = [9.5, 10.5, 11.5, 12.5, 13.5, 14.5, 15.5, 14.5, 13.5, 12.5]
    batch = ATR.compute(h, l, c, 5)
    inc = ATR(5)
    series = [inc.update(*bar) for bar in zip(h, l, c)]
    assert len(batch) == len(series) == 10
    assert batch[:5] == [None] * 5
    for b, s in zip(batch[5:], series[5:]):
        assert b == pytest.approx(s, abs=1e-12)


def test_atr_compute_truncates_to_shortest_input():
    out = ATR.compute([10, 11, 12], [9, 10], [9.5, 10.5, 11.5, 12.5], 1)
    assert len(out) == 2
    assert out[0] is None
    assert out[1] == pytest.approx(1.5)


def test_atr_reset_clears_state():
    atr = ATR(3)
    atr.update(10, 9, 9.5)
    atr.update(11, 9.5, 10.0)
    atr.update(12, 10.0, 11.0)
    atr.update(12.5, 11.5, 12.0)
    assert atr.value() is not None
    atr.reset()
    assert atr.value() is None
    assert atr.update(10, 9, 9.5) is None


def test_atr_rejects_zero_period():
    with pytest.raises(ValueError):
        ATR(0)


def test_adx_warmup_timeline_respected():
    period = 14
    adx = ADX(period)
    for i in range(2 * period - 1):
        base = 100 + i * 0.1
        assert adx.update(base, base - 1.0, base - 0.4) is None
    first = adx.update(102.0, 101.0, 101.5)
    assert first is not None
    for field in (first.plus_di, first.minus_di, first.dx, first.adx):
        assert math.isfinite(field)
        assert 0.0 <= field <= 100.0


def test_adx_batch_equals_incremental():
    h, l, c = [], [], []
    for i in range(80):
        base = 100.0 + math.sin(i * 0.15) * 2.0
        h.append(base + 1.0)
        l.append(base - 1.0)
        c.append(base)
    batch = ADX.compute(h, l, c, 10)
    inc = ADX(10)
    series = [inc.update(*bar) for bar in zip(h, l, c)]
    assert len(batch) == len(series) == 80
    assert batch[:19] == [None] * 19
    for b, s in zip(batch[19:], series[19:]):
        assert b.plus_di == pytest.approx(s.plus_di, abs=1e-9)
        assert b.minus_di == pytest.approx(s.minus_di, abs=1e-9)
        assert b.dx == pytest.approx(s.dx, abs=1e-9)
        assert b.adx == pytest.approx(s.adx, abs=1e-9)


def test_adx_higher_in_trend_than_in_choppy_market():
    period = 7
    adx = ADX(period)
    for _ in range(2 * period - 1):
        adx.update(100.0, 99.5, 99.75)

    a_values = []
    prev_base = 100.0
    for i in range(80):
        base = prev_base + (0.35 if i % 2 == 0 else -0.35)
        out = adx.update(base + 0.20, base - 0.20, base)
        if out is not None:
            a_values.append(out.adx)
        prev_base = base
    assert len(a_values) > 20
    a_avg = sum(a_values) / len(a_values)

    b_values = []
    base = prev_base
    for _ in range(80):
        base += 0.70
        out = adx.update(base + 1.80, base - 0.20, base + 0.90)
        if out is not None:
            b_values.append(out.adx)
    assert len(b_values) > 20
    b_avg = sum(b_values) / len(b_values)

    assert b_avg > a_avg + 10.0
    assert b_avg > 20.0


def test_adx_flat_bars_give_zero_direction():
    out = ADX.compute([100.0] * 10, [99.5] * 10, [99.75] * 10, 3)
    assert out[:5] == [None] * 5
    assert out[5] == ADXOut(0.0, 0.0, 0.0, 0.0)
    assert out[9] == ADXOut(0.0, 0.0, 0.0, 0.0)


def test_adx_steady_uptrend_has_only_plus_di():
    h = [10.0 + i for i in range(12)]
    l = [9.0 + i for i in range(12)]
    c = [9.5 + i for i in range(12)]
    out = ADX.compute(h, l, c, 3)
    ready = [o for o in out if o is not None]
    assert len(ready) == 12 - 5
    for o in ready:
        assert o.minus_di == pytest.approx(0.0)
        assert o.plus_di > 0.0
        assert o.dx == pytest.approx(100.0)
        assert o.adx == pytest.approx(100.0)


def test_adx_reset_clears_state_and_restarts_warmup():
    adx = ADX(5)
    for i in range(11):
        adx.update(10 + i, 9 + i, 9.5 + i)
    assert adx.update(21, 19.5, 20.1) is not None
    adx.reset()
    assert adx.update(10, 9.5, 9.8) is None
    assert adx.update(11, 10.2, 10.6) is None


def test_adx_rejects_zero_period():
    with pytest.raises(ValueError):
        ADX(0)