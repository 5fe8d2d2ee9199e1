from __future__ import annotations

import math

import numpy as np
import pytest

from engine.scene import decor
from engine.scene.viewport import VisibleArea


@pytest.mark.smoke
@pytest.mark.parametrize(
    "s, count",
    [(0.0, 0), (0.4, 0), (0.4001, 20), (0.5, 25), (1.0, 50)],
)
def test_dust_count_threshold_is_strict(s: float, count: int) -> None:
    assert decor.dust_count(s) == count


def test_dust_stays_inside_visible_area() -> None:
    area = VisibleArea(100.0, 100.0, 200.0)
    layer = decor.dust_layer(area, 0.9, np.random.default_rng(0))
    assert layer is not None and layer.mode == "fill"
    assert layer.geometry.n_lines == 45
    # 直径は最大 3 px
    assert layer.geometry.coords[:, 0].min() >= 100.0 - 1.5
    assert layer.geometry.coords[:, 0].max() <= 300.0 + 1.5


def test_no_dust_below_threshold_or_on_empty_area() -> None:
    rng = np.random.default_rng(0)
    assert decor.dust_layer(VisibleArea(0, 0, 100), 0.4, rng) is None
    assert decor.dust_layer(VisibleArea(0, 0, 0), 0.9, rng) is None


def test_sun_and_moon_are_opposite_on_the_orbit() -> None:
    area = VisibleArea(0.0, 0.0, 400.0)
    sun, moon = decor.celestial_layers(area, 0.3)
    sc = sun.geometry.coords.mean(axis=0)
    mc = moon.geometry.coords.mean(axis=0)
    center = np.array([200.0, 200.0])
    assert np.allclose((sc + mc) / 2.0, center, atol=1e-3)
    assert np.linalg.norm(sc - center) == pytest.approx(160.0, rel=1e-4)
    # phase=0.3 は中心の上側・右寄り
    assert sc[1] < 200.0 and sc[0] > 200.0
    assert (sun.name, moon.name) == ("sun", "moon")


def test_grass_has_ground_band_and_blades() -> None:
    area = VisibleArea(50.0, 50.0, 500.0)
    ground, blades = decor.grass_layers(area, 0.0, np.random.default_rng(0))
    assert ground.mode == "fill" and blades.mode == "stroke"
    ys = ground.geometry.coords[:, 1]
    assert ys.min() == pytest.approx(50.0 + 0.8 * 500.0)
    assert ys.max() == pytest.approx(550.0)
    assert blades.geometry.n_lines == decor.GRASS_BLADES
    # 葉先は地面より上（y が小さい）
    for line in blades.geometry.lines():
        assert line[1, 1] < line[0, 1]


def test_gauge_fill_tracks_squeeze_and_color() -> None:
    empty = decor.gauge_layers(800.0, 600.0, 0.0)
    assert [l.name for l in empty] == ["gauge_bg"]

    half = decor.gauge_layers(800.0, 600.0, 0.5)
    bg, fill = half
    bg_h = np.ptp(bg.geometry.coords[:, 1])
    fill_h = np.ptp(fill.geometry.coords[:, 1])
    assert fill_h == pytest.approx(bg_h * 0.5)
    # 下端は揃う
    assert fill.geometry.coords[:, 1].max() == pytest.approx(bg.geometry.coords[:, 1].max())

    full = decor.gauge_layers(800.0, 600.0, 1.0)
    assert full[1].color == pytest.approx(decor.GAUGE_HIGH_COLOR)
    assert decor.gauge_color(0.0) == pytest.approx(decor.GAUGE_LOW_COLOR)


def test_pointer_is_clamped_into_area() -> None:
    area = VisibleArea(100.0, 100.0, 100.0)
    layer = decor.pointer_layer(area, 0.0, 500.0)
    c = layer.geometry.coords.mean(axis=0)
    assert c == pytest.approx((100.0, 200.0), abs=1e-3)
    assert math.isclose(np.ptp(layer.geometry.coords[:, 0]), decor.POINTER_DIAMETER, rel_tol=0.02)
