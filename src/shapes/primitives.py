"""
どこで: `shapes.primitives`。
何を: 矩形・楕円・円周上の点など、装飾描画で使う基本図形を Geometry で生成する。
なぜ: レンダラを「塗りポリゴンと線」だけに限定し、楕円も多角形近似で同じ経路に載せるため。
"""

from __future__ import annotations

import math

import numpy as np

from engine.core.geometry import Geometry

# 円近似の分割数（半径に応じて 12..64 にクランプ）
MIN_SEGMENTS = 12
MAX_SEGMENTS = 64


def rect(x: float, y: float, w: float, h: float) -> Geometry:
    """左上 (x, y)・幅 w・高さ h の矩形（TL, TR, BR, BL）。"""
    pts = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=np.float32)
    return Geometry.from_lines([pts])


def _ellipse_vertices(cx: float, cy: float, w: float, h: float, segments: int | None) -> np.ndarray:
    if segments is None:
        r = max(w, h) * 0.5
        segments = int(max(MIN_SEGMENTS, min(MAX_SEGMENTS, round(r * 1.5))))
    t = np.linspace(0.0, 2.0 * np.pi, segments, endpoint=False)
    return np.stack([cx + np.cos(t) * w * 0.5, cy + np.sin(t) * h * 0.5], axis=1).astype(np.float32)


def ellipse(cx: float, cy: float, w: float, h: float, *, segments: int | None = None) -> Geometry:
    """中心 (cx, cy)・直径 (w, h) の楕円を多角形近似で返す。"""
    return Geometry.from_lines([_ellipse_vertices(cx, cy, w, h, segments)])


def ellipses(centers: np.ndarray, sizes: np.ndarray, *, segments: int = MIN_SEGMENTS) -> Geometry:
    """同じ分割数の円を一括生成する（塵のように数が多いもの向け）。

    centers: (K, 2), sizes: (K,) 直径。
    """
    centers = np.asarray(centers, dtype=np.float32).reshape(-1, 2)
    sizes = np.asarray(sizes, dtype=np.float32).reshape(-1)
    if centers.shape[0] == 0:
        return Geometry.empty()
    t = np.linspace(0.0, 2.0 * np.pi, segments, endpoint=False)
    unit = np.stack([np.cos(t), np.sin(t)], axis=1).astype(np.float32)  # (S, 2)
    pts = centers[:, None, :] + unit[None, :, :] * (sizes[:, None, None] * 0.5)
    coords = pts.reshape(-1, 2)
    offsets = np.arange(0, centers.shape[0] + 1, dtype=np.int32) * segments
    return Geometry(coords, offsets)


def orbit_point(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    """円軌道上の点。angle=0 で中心の真上、増加で時計回り（y 下向き座標）。"""
    return (cx + math.sin(angle) * radius, cy - math.cos(angle) * radius)


__all__ = ["rect", "ellipse", "ellipses", "orbit_point"]
