"""
どこで: `engine.scene.decor`。
何を: 家以外の装飾（塵・太陽と月・地面と草・圧力計・ポインタ表示）を Layer として生成する。
なぜ: 合成順序は composer に任せ、ここでは「何をどこに描くか」だけを純関数で決めるため。
"""

from __future__ import annotations

import math

import numpy as np

from effects.jitter import jitter
from engine.core.geometry import Geometry
from engine.render.types import Layer
from shapes import primitives
from util.color import lerp_color, rgb255

from .viewport import VisibleArea

DUST_COLOR = rgb255(200, 200, 200, 80)
DUST_SIZE_RANGE = (1.0, 3.0)
POINTER_COLOR = rgb255(255, 255, 255, 80)
POINTER_DIAMETER = 15.0
SUN_COLOR = rgb255(255, 215, 90)
MOON_COLOR = rgb255(235, 235, 245)
GROUND_COLOR = rgb255(76, 140, 60)
BLADE_COLOR = rgb255(60, 120, 45)
GAUGE_BG_COLOR = rgb255(40, 40, 40, 200)
GAUGE_LOW_COLOR = rgb255(0, 200, 0)
GAUGE_HIGH_COLOR = rgb255(220, 0, 0)

ORBIT_RADIUS_RATIO = 0.4
SUN_DIAMETER_RATIO = 0.1
MOON_DIAMETER_RATIO = 0.08
GROUND_TOP_RATIO = 0.8
GRASS_BLADES = 48
GAUGE_MARGIN = 12.0
GAUGE_WIDTH = 14.0
GAUGE_MAX_HEIGHT = 200.0


def dust_count(squeeze: float, threshold: float = 0.4, coeff: float = 50.0) -> int:
    """塵の粒数。閾値を **超えた** ときだけ `floor(s × coeff)`。"""
    if not squeeze > threshold:
        return 0
    return int(math.floor(squeeze * coeff))


def dust_layer(
    area: VisibleArea,
    squeeze: float,
    rng: np.random.Generator,
    *,
    threshold: float = 0.4,
    coeff: float = 50.0,
) -> Layer | None:
    """可視領域内にランダムに散らばる塵（毎フレーム引き直し）。"""
    n = dust_count(squeeze, threshold, coeff)
    if n == 0 or area.is_empty:
        return None
    sizes = rng.uniform(*DUST_SIZE_RANGE, size=n)
    xs = area.x + rng.uniform(0.0, area.size, size=n)
    ys = area.y + rng.uniform(0.0, area.size, size=n)
    geo = primitives.ellipses(np.stack([xs, ys], axis=1), sizes, segments=8)
    return Layer(geo, DUST_COLOR, "fill", name="dust")


def celestial_layers(area: VisibleArea, phase: float) -> list[Layer]:
    """太陽（角度 phase）と月（phase + π）を可視領域中心の円軌道上に置く。"""
    cx, cy = area.center
    radius = area.size * ORBIT_RADIUS_RATIO
    sx, sy = primitives.orbit_point(cx, cy, radius, phase)
    mx, my = primitives.orbit_point(cx, cy, radius, phase + math.pi)
    sun_d = area.size * SUN_DIAMETER_RATIO
    moon_d = area.size * MOON_DIAMETER_RATIO
    return [
        Layer(primitives.ellipse(sx, sy, sun_d, sun_d), SUN_COLOR, "fill", name="sun"),
        Layer(primitives.ellipse(mx, my, moon_d, moon_d), MOON_COLOR, "fill", name="moon"),
    ]


def grass_layers(
    area: VisibleArea,
    squeeze: float,
    rng: np.random.Generator,
    *,
    max_jitter: float = 20.0,
) -> list[Layer]:
    """地面の帯と草の葉。葉先は squeeze に応じて家と同じ規則で揺れる（揺れ幅は 1/4）。"""
    top = area.y + area.size * GROUND_TOP_RATIO
    ground = primitives.rect(area.x, top, area.size, area.y + area.size - top)

    i = np.arange(GRASS_BLADES, dtype=np.float64)
    base_x = area.x + (i + 0.5) / GRASS_BLADES * area.size
    # 高さは固定パターン（毎フレーム変わらない）
    heights = area.size * (0.02 + 0.015 * ((i * 7) % 5) / 4.0)
    lean = np.sin(i * 1.7) * area.size * 0.008
    tips = np.stack([base_x + lean, np.full_like(base_x, top) - heights], axis=1)
    tips = jitter(tips, squeeze, rng, max_jitter=max_jitter * 0.25)
    bases = np.stack([base_x, np.full_like(base_x, top)], axis=1)
    blades = Geometry.from_lines(np.stack([bases, tips], axis=1))

    thickness = max(1.0, area.size * 0.004)
    return [
        Layer(ground, GROUND_COLOR, "fill", name="ground"),
        Layer(blades, BLADE_COLOR, "stroke", thickness=thickness, name="grass"),
    ]


def gauge_color(squeeze: float):
    return lerp_color(GAUGE_LOW_COLOR, GAUGE_HIGH_COLOR, squeeze)


def gauge_layers(viewport_width: float, viewport_height: float, squeeze: float) -> list[Layer]:
    """ビューポート左上の縦型圧力計。充填率 = s、色は緑 → 赤。"""
    height = min(GAUGE_MAX_HEIGHT, viewport_height * 0.3)
    if height <= 0.0 or viewport_width <= 2.0 * GAUGE_MARGIN:
        return []
    x, y = GAUGE_MARGIN, GAUGE_MARGIN
    layers = [Layer(primitives.rect(x, y, GAUGE_WIDTH, height), GAUGE_BG_COLOR, "fill", name="gauge_bg")]
    s = min(max(squeeze, 0.0), 1.0)
    if s > 0.0:
        fill_h = height * s
        layers.append(
            Layer(
                primitives.rect(x, y + height - fill_h, GAUGE_WIDTH, fill_h),
                gauge_color(s),
                "fill",
                name="gauge_fill",
            )
        )
    return layers


def pointer_layer(area: VisibleArea, pointer_x: float, pointer_y: float) -> Layer:
    """可視領域内に押し込んだポインタ位置の半透明の円。"""
    bx, by = area.clamp(pointer_x, pointer_y)
    return Layer(
        primitives.ellipse(bx, by, POINTER_DIAMETER, POINTER_DIAMETER),
        POINTER_COLOR,
        "fill",
        name="pointer",
    )


__all__ = [
    "dust_count",
    "dust_layer",
    "celestial_layers",
    "grass_layers",
    "gauge_color",
    "gauge_layers",
    "pointer_layer",
]
