"""
どこで: `engine.scene.distortion`。
何を: 家パーツの相対座標を可視領域の画素座標へ写像し、squeeze に応じた揺れを加える。
なぜ: 縮む領域に合わせて家を描き直しつつ、圧迫の強さを頂点の震えとして見せるため。
"""

from __future__ import annotations

import numpy as np

from effects.jitter import DEFAULT_MAX_JITTER, jitter
from shapes.house import HousePart

from .viewport import VisibleArea


def distort_part(
    part: HousePart,
    area: VisibleArea,
    squeeze: float,
    rng: np.random.Generator,
    *,
    max_jitter: float = DEFAULT_MAX_JITTER,
) -> np.ndarray:
    """パーツ 1 つを閉じたポリゴンの頂点 (K, 2) にする。

    矩形は常に 4 頂点（TL, TR, BR, BL）、三角形は入力順の 3 頂点。
    揺れは毎回引き直し、保持しない。
    """
    anchors = part.anchors(area.size, area.size)
    shaken = jitter(anchors, squeeze, rng, max_jitter=max_jitter)
    return shaken + np.array([area.x, area.y], dtype=np.float64)


def distort_parts(
    parts: tuple[HousePart, ...] | list[HousePart],
    area: VisibleArea,
    squeeze: float,
    rng: np.random.Generator,
    *,
    max_jitter: float = DEFAULT_MAX_JITTER,
) -> list[np.ndarray]:
    """全パーツを描画順に変換する。空の可視領域では何も返さない。"""
    if area.is_empty:
        return []
    return [distort_part(p, area, squeeze, rng, max_jitter=max_jitter) for p in parts]


__all__ = ["distort_part", "distort_parts"]
