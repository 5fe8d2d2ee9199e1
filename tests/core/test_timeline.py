from __future__ import annotations

import pytest

from engine.core.clock import ManualClock, MonotonicClock
from engine.core.timeline import SqueezeTimeline


@pytest.mark.smoke
@pytest.mark.parametrize(
    "elapsed, expected",
    [(0.0, 0.0), (45.0, 0.25), (90.0, 0.5), (179.0, 179.0 / 180.0), (180.0, 1.0)],
)
def test_squeeze_factor_is_linear_within_duration(elapsed: float, expected: float) -> None:
    clock = ManualClock(10.0)
    tl = SqueezeTimeline(180.0, clock)
    clock.advance(elapsed)
    assert tl.squeeze_factor() == pytest.approx(expected)


def test_squeeze_factor_is_exactly_one_after_duration() -> None:
    clock = ManualClock()
    tl = SqueezeTimeline(180.0, clock)
    clock.advance(10_000.0)
    assert tl.squeeze_factor() == 1.0


def test_clock_behind_start_clamps_to_zero() -> None:
    clock = ManualClock(50.0)
    tl = SqueezeTimeline(10.0, clock)
    clock.set(40.0)
    assert tl.elapsed() == 0.0
    assert tl.squeeze_factor() == 0.0


def test_reset_restarts_from_current_time() -> None:
    clock = ManualClock()
    tl = SqueezeTimeline(100.0, clock)
    clock.advance(70.0)
    assert tl.squeeze_factor() == pytest.approx(0.7)
    tl.reset()
    assert tl.start_time == 70.0
    assert tl.squeeze_factor() == 0.0
    clock.advance(25.0)
    assert tl.squeeze_factor() == pytest.approx(0.25)


@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_non_positive_duration_is_rejected(duration: float) -> None:
    with pytest.raises(ValueError):
        SqueezeTimeline(duration, ManualClock())


def test_monotonic_clock_does_not_go_backwards() -> None:
    c = MonotonicClock()
    t0 = c.now()
    t1 = c.now()
    assert t1 >= t0
