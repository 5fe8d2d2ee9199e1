"""
どこで: `engine.scene.viewport`。
何を: squeeze factor から「まだ枠に覆われていない」中央の正方形（可視領域）を求める。
なぜ: 歪み/ひび割れ/塵/カーソルがすべて同じ可視領域へ写像されるため、計算を一箇所に置く。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VisibleArea:
    """ビューポート内の可視正方形（左上 x, y と一辺 size, 画素）。"""

    x: float
    y: float
    size: float

    @property
    def is_empty(self) -> bool:
        return self.size <= 0.0

    @property
    def center(self) -> tuple[float, float]:
        half = self.size * 0.5
        return (self.x + half, self.y + half)

    def clamp(self, px: float, py: float) -> tuple[float, float]:
        """点を可視領域内へ押し込む（両軸をクランプ）。"""
        cx = min(max(px, self.x), self.x + self.size)
        cy = min(max(py, self.y), self.y + self.size)
        return (cx, cy)


def max_border_width(width: float, height: float) -> float:
    """枠が画面中央に届く幅（短辺の半分）。"""
    return min(width, height) / 2.0


def compute_visible_area(width: float, height: float, squeeze: float) -> VisibleArea:
    """4 辺から均等に迫る枠の内側を、ビューポート中央に置いた正方形として返す。

    一辺は `max(0, min(W, H) - 2 · s · min(W, H) / 2)`。
    """
    s = min(max(float(squeeze), 0.0), 1.0)
    border = s * max_border_width(width, height)
    size = max(0.0, min(width, height) - 2.0 * border)
    return VisibleArea((width - size) / 2.0, (height - size) / 2.0, size)


__all__ = ["VisibleArea", "compute_visible_area", "max_border_width"]
