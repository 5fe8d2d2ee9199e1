"""
どこで: `shapes.crack`。
何を: ひび割れの種（Crack）と、種から再帰的に枝分かれする線分木を生成する純関数。
なぜ: 生成（乱数と再帰）と描画を分離し、終端性や葉条件をテストできるようにするため。

生成規則（1 ノード）:
1. 終点 `(sx + cos(a)·L, sy + sin(a)·L)` を求め、線分を 1 本出す。
   線幅は `lerp(0.5, 2, intensity)`。
2. `branches == 0` または `intensity <= 0.5` なら葉（子なし）。
3. それ以外は **ちょうど `branches` 本** の子を出す。子は終点から、長さ 0.6 倍、
   角度 ±π/3 の一様乱数、`branches - 1`、`intensity × 0.8`。

`branches` は段ごとに 1 減り、intensity も 0.8 倍ずつ縮むので再帰は必ず止まる。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from engine.core.geometry import Geometry

MIN_STROKE_WEIGHT = 0.5
MAX_STROKE_WEIGHT = 2.0
BRANCH_INTENSITY_THRESHOLD = 0.5
BRANCH_LENGTH_RATIO = 0.6
BRANCH_INTENSITY_DECAY = 0.8
BRANCH_ANGLE_SPREAD = math.pi / 3


@dataclass(frozen=True)
class Crack:
    """ひび割れの種。座標・長さは可視領域に対する相対値。"""

    start_x: float
    start_y: float
    length: float
    angle: float
    branches: int


@dataclass(frozen=True)
class CrackSegment:
    """生成済みの線分 1 本（絶対座標, 画素）。"""

    x0: float
    y0: float
    x1: float
    y1: float
    weight: float
    depth: int


def stroke_weight(intensity: float) -> float:
    """intensity 0..1 を線幅 0.5..2 px へ写像する（範囲外は外挿）。"""
    return MIN_STROKE_WEIGHT + (MAX_STROKE_WEIGHT - MIN_STROKE_WEIGHT) * intensity


def generate_crack_tree(
    start_x: float,
    start_y: float,
    length: float,
    angle: float,
    branches: int,
    intensity: float,
    rng: np.random.Generator,
) -> list[CrackSegment]:
    """1 本の種から枝分かれ線分木を生成し、深さ優先順の線分リストを返す。"""
    if branches < 0:
        raise ValueError(f"branches must be >= 0, got {branches}")
    segments: list[CrackSegment] = []
    _grow(segments, start_x, start_y, length, angle, int(branches), intensity, rng, 0)
    return segments


def _grow(
    out: list[CrackSegment],
    sx: float,
    sy: float,
    length: float,
    angle: float,
    branches: int,
    intensity: float,
    rng: np.random.Generator,
    depth: int,
) -> None:
    ex = sx + math.cos(angle) * length
    ey = sy + math.sin(angle) * length
    out.append(CrackSegment(sx, sy, ex, ey, stroke_weight(intensity), depth))

    if branches == 0 or intensity <= BRANCH_INTENSITY_THRESHOLD:
        return

    child_length = length * BRANCH_LENGTH_RATIO
    child_intensity = intensity * BRANCH_INTENSITY_DECAY
    # 子の本数は「残り予算」そのもの（branches - 1 ではない）
    for _ in range(branches):
        child_angle = angle + rng.uniform(-BRANCH_ANGLE_SPREAD, BRANCH_ANGLE_SPREAD)
        _grow(out, ex, ey, child_length, child_angle, branches - 1, child_intensity, rng, depth + 1)


def crack_segments(
    crack: Crack,
    width: float,
    height: float,
    intensity: float,
    rng: np.random.Generator,
) -> list[CrackSegment]:
    """相対座標の種を可視領域 (width, height) へ写像してから木を生成する。

    長さは可視領域の幅に対する比率として扱う。
    """
    return generate_crack_tree(
        crack.start_x * width,
        crack.start_y * height,
        crack.length * width,
        crack.angle,
        crack.branches,
        intensity,
        rng,
    )


def segments_by_weight(segments: list[CrackSegment]) -> dict[float, Geometry]:
    """同じ線幅の線分をまとめた Geometry（各図形 = 2 点の線分）を返す。挿入順を保つ。"""
    grouped: dict[float, list[list[tuple[float, float]]]] = {}
    for s in segments:
        grouped.setdefault(s.weight, []).append([(s.x0, s.y0), (s.x1, s.y1)])
    return {w: Geometry.from_lines(lines) for w, lines in grouped.items()}


def max_depth(segments: list[CrackSegment]) -> int:
    return max((s.depth for s in segments), default=-1)


__all__ = [
    "Crack",
    "CrackSegment",
    "stroke_weight",
    "generate_crack_tree",
    "crack_segments",
    "segments_by_weight",
    "max_depth",
]
