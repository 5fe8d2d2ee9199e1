from __future__ import annotations

import math

import pytest

from engine.scene.ambient import (
    DAYTIME,
    MIDNIGHT,
    SUNRISE,
    SUNSET,
    AmbientContext,
    CycleResolver,
    QuadrantResolver,
    cycle_advance_rate,
    get_ambient_resolver,
    is_ambient_registered,
    list_ambient_resolvers,
)


def _ctx(px: float = 0.0, py: float = 0.0, phase: float = 0.0) -> AmbientContext:
    return AmbientContext(px, py, 800.0, 600.0, phase, 0.0)


@pytest.mark.parametrize(
    "px, py, expected",
    [
        (10.0, 10.0, DAYTIME),
        (790.0, 10.0, SUNSET),
        (10.0, 590.0, SUNRISE),
        (790.0, 590.0, MIDNIGHT),
        (400.0, 300.0, MIDNIGHT),  # 中心線上は右下扱い
    ],
)
def test_quadrant_resolver_picks_color_by_pointer(px, py, expected) -> None:
    assert QuadrantResolver().resolve(_ctx(px, py)) == expected


@pytest.mark.parametrize(
    "phase, expected",
    [
        (0.0, DAYTIME),
        (math.pi / 2, SUNSET),
        (math.pi, MIDNIGHT),
        (3 * math.pi / 2, SUNRISE),
        (2 * math.pi, DAYTIME),
    ],
)
def test_cycle_resolver_hits_keyframes(phase: float, expected) -> None:
    assert CycleResolver().resolve(_ctx(phase=phase)) == pytest.approx(expected)


def test_cycle_resolver_interpolates_between_keyframes() -> None:
    mid = CycleResolver().resolve(_ctx(phase=math.pi / 4))
    expected = tuple((a + b) / 2 for a, b in zip(DAYTIME, SUNSET))
    assert mid == pytest.approx(expected)


def test_cycle_rate_scales_with_squeeze() -> None:
    assert cycle_advance_rate(0.0) == pytest.approx(0.01)
    assert cycle_advance_rate(1.0) == pytest.approx(0.06)
    assert cycle_advance_rate(0.5) == pytest.approx(0.035)


def test_registry_resolves_by_normalized_name() -> None:
    assert list_ambient_resolvers() == ["cycle", "quadrant"]
    assert isinstance(get_ambient_resolver("Quadrant"), QuadrantResolver)
    assert get_ambient_resolver("cycle").uses_cycle is True
    assert is_ambient_registered("CYCLE")
    assert not is_ambient_registered("aurora")
    with pytest.raises(KeyError):
        get_ambient_resolver("aurora")
