"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウ寸法の解決と投影行列の生成を提供。
なぜ: `api.sketch` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

import numpy as np


def resolve_fps(requested_fps: int | None, *, default: int = 60) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - None は既定値。
    """
    if requested_fps is None:
        return max(1, int(default))
    try:
        v = int(requested_fps)
    except (TypeError, ValueError):
        return max(1, int(default))
    return v if v >= 1 else max(1, int(default))


def resolve_window_size(width: int, height: int) -> tuple[int, int]:
    """ウィンドウ寸法 [px] を検証して返す。0 以下は `ValueError`。"""
    w, h = int(width), int(height)
    if w <= 0 or h <= 0:
        raise ValueError(f"window size must be positive, got: {(w, h)}")
    return w, h


def build_projection(width: float, height: float) -> "np.ndarray":
    """ウィンドウ画素（左上原点・y 下向き）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    w = max(1.0, float(width))
    h = max(1.0, float(height))
    proj = np.array(
        [
            [2 / w, 0, 0, -1],
            [0, -2 / h, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = ["resolve_fps", "resolve_window_size", "build_projection"]
