from __future__ import annotations

import math

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis")  # noqa: F401 - 依存確認のみ
from hypothesis import given, settings  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from effects.jitter import jitter_offsets  # noqa: E402
from engine.core.clock import ManualClock  # noqa: E402
from engine.core.timeline import SqueezeTimeline  # noqa: E402
from engine.scene.population import CrackPopulation  # noqa: E402
from engine.scene.viewport import compute_visible_area  # noqa: E402
from shapes.crack import generate_crack_tree, max_depth  # noqa: E402


@given(
    duration=st.floats(min_value=0.1, max_value=1e4),
    elapsed=st.floats(min_value=-1e4, max_value=1e5),
)
def test_squeeze_factor_in_unit_interval(duration: float, elapsed: float) -> None:
    clock = ManualClock(0.0)
    tl = SqueezeTimeline(duration, clock)
    clock.advance(elapsed)
    s = tl.squeeze_factor()
    assert 0.0 <= s <= 1.0
    if elapsed >= duration:
        assert s == 1.0


@given(
    branches=st.integers(min_value=0, max_value=3),
    intensity=st.floats(min_value=1e-6, max_value=1.0),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
@settings(max_examples=60, deadline=None)
def test_crack_tree_terminates_with_bounded_depth(branches: int, intensity: float, seed: int) -> None:
    segs = generate_crack_tree(0.0, 0.0, 10.0, 0.0, branches, intensity, np.random.default_rng(seed))
    assert 1 <= len(segs)
    assert max_depth(segs) <= min(branches, 20)
    if intensity <= 0.5:
        assert len(segs) == 1


@given(
    s=st.floats(min_value=0.0, max_value=1.0),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_jitter_within_bounds(s: float, seed: int) -> None:
    off = jitter_offsets(64, s, np.random.default_rng(seed))
    assert np.all(np.abs(off) <= 20.0 * s + 1e-9)


@given(
    w=st.floats(min_value=0.0, max_value=4000.0),
    h=st.floats(min_value=0.0, max_value=4000.0),
    s=st.floats(min_value=-1.0, max_value=2.0),
)
def test_visible_area_nonnegative_and_centered(w: float, h: float, s: float) -> None:
    area = compute_visible_area(w, h, s)
    assert area.size >= 0.0
    assert area.size <= min(w, h) + 1e-9
    cx, cy = area.center
    assert cx == pytest.approx(w / 2.0, abs=1e-6)
    assert cy == pytest.approx(h / 2.0, abs=1e-6)


@given(
    squeezes=st.lists(st.floats(min_value=0.0, max_value=1.0), min_size=1, max_size=200),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
@settings(deadline=None)
def test_population_respects_cap_for_increasing_squeeze(squeezes: list[float], seed: int) -> None:
    rng = np.random.default_rng(seed)
    pop = CrackPopulation(spawn_coeff=2.0)
    cracks: list = []
    for s in sorted(squeezes):
        pop.step(cracks, s, rng)
        assert len(cracks) <= math.floor(20.0 * s)
