"""
どこで: `shapes.house`。
何を: 家を構成するパーツ（矩形/三角形）の相対座標定義と、既定の家の組み立て。
なぜ: パーツを「可視領域に対する 0..1 の相対座標」で持ち、縮む領域へ毎フレーム写像できるようにするため。

パーツは不変（frozen）で、リセット時は `create_house_parts()` で丸ごと作り直す。
矩形でも三角形でもない形はそもそも構築できない（`HousePart` は 2 種の直和）。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from common.types import RGBA, Vec2
from util.color import rgb255


@dataclass(frozen=True)
class RectPart:
    """相対原点 (x, y) と相対サイズ (w, h) を持つ矩形パーツ。"""

    x: float
    y: float
    w: float
    h: float
    color: RGBA

    def anchors(self, width: float, height: float) -> np.ndarray:
        """可視領域 (width, height) での頂点 (4, 2)。順序は TL, TR, BR, BL。"""
        x0 = self.x * width
        y0 = self.y * height
        x1 = x0 + self.w * width
        y1 = y0 + self.h * height
        return np.array([[x0, y0], [x1, y0], [x1, y1], [x0, y1]], dtype=np.float64)


@dataclass(frozen=True)
class TrianglePart:
    """相対頂点 3 つを持つ三角形パーツ（頂点順は保持する）。"""

    vertices: tuple[Vec2, Vec2, Vec2]
    color: RGBA

    def __post_init__(self) -> None:
        if len(self.vertices) != 3 or any(len(v) != 2 for v in self.vertices):
            raise ValueError(f"TrianglePart には (x, y) 頂点がちょうど 3 つ必要です: {self.vertices!r}")

    def anchors(self, width: float, height: float) -> np.ndarray:
        """可視領域 (width, height) での頂点 (3, 2)。"""
        rel = np.asarray(self.vertices, dtype=np.float64)
        return rel * np.array([width, height], dtype=np.float64)


HousePart = RectPart | TrianglePart


def create_house_parts() -> tuple[HousePart, ...]:
    """既定の家（本体・屋根・扉・左右の窓）を描画順に返す。"""
    window_color = rgb255(200, 230, 255)
    return (
        # 本体: 幅の 20% から 60%、高さの 30% から 50%
        RectPart(0.2, 0.3, 0.6, 0.5, rgb255(200, 180, 150)),
        TrianglePart(((0.2, 0.3), (0.5, 0.1), (0.8, 0.3)), rgb255(150, 100, 50)),
        RectPart(0.425, 0.55, 0.15, 0.25, rgb255(120, 80, 40)),
        RectPart(0.3, 0.4, 0.1, 0.1, window_color),
        RectPart(0.6, 0.4, 0.1, 0.1, window_color),
    )


__all__ = ["RectPart", "TrianglePart", "HousePart", "create_house_parts"]
