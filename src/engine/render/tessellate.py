"""
どこで: `engine.render.tessellate`。
何を: Layer（塗り/線）を三角形リストへ分解し、色付き頂点配列 (V, 6) = [x, y, r, g, b, a] にまとめる。
なぜ: GPU 側を「色付き三角形を描くだけ」の 1 プログラムにし、描画順をそのまま頂点順で保つため。
"""

from __future__ import annotations

import logging

import numpy as np

from engine.core.geometry import Geometry
from engine.runtime.frame import RenderFrame

from .types import Layer

logger = logging.getLogger(__name__)

VERTEX_STRIDE = 6  # x, y, r, g, b, a


def fill_triangles(geometry: Geometry) -> np.ndarray:
    """各図形を扇形分割した三角形頂点 (T·3, 2) を返す。3 頂点未満の図形は捨てる。

    家のパーツは凸（揺れで僅かに崩れる程度）なので扇形分割で十分。
    """
    chunks: list[np.ndarray] = []
    for poly in geometry.lines():
        n = poly.shape[0]
        if n < 3:
            continue
        i = np.arange(1, n - 1)
        idx = np.stack([np.zeros_like(i), i, i + 1], axis=1).reshape(-1)
        chunks.append(poly[idx])
    if not chunks:
        return np.empty((0, 2), dtype=np.float32)
    return np.concatenate(chunks, axis=0).astype(np.float32, copy=False)


def stroke_triangles(geometry: Geometry, thickness: float) -> np.ndarray:
    """各折れ線の線分を太さ `thickness` の矩形（2 三角形）にした頂点 (T·3, 2) を返す。

    長さ 0 の線分は描かない。端点の継ぎ目処理は行わない（線が細いので目立たない）。
    """
    half = float(thickness) * 0.5
    chunks: list[np.ndarray] = []
    for line in geometry.lines():
        if line.shape[0] < 2:
            continue
        p0 = line[:-1].astype(np.float64)
        p1 = line[1:].astype(np.float64)
        d = p1 - p0
        length = np.hypot(d[:, 0], d[:, 1])
        keep = length > 1e-9
        if not np.any(keep):
            continue
        p0, p1, d, length = p0[keep], p1[keep], d[keep], length[keep]
        normal = np.stack([-d[:, 1], d[:, 0]], axis=1) / length[:, None] * half
        a, b = p0 + normal, p0 - normal
        c, e = p1 + normal, p1 - normal
        quads = np.stack([a, b, c, c, b, e], axis=1).reshape(-1, 2)
        chunks.append(quads)
    if not chunks:
        return np.empty((0, 2), dtype=np.float32)
    return np.concatenate(chunks, axis=0).astype(np.float32)


def layer_vertices(layer: Layer) -> np.ndarray:
    """1 レイヤーを色付き頂点 (V, 6) にする。"""
    if layer.mode == "fill":
        tri = fill_triangles(layer.geometry)
    else:
        tri = stroke_triangles(layer.geometry, layer.thickness)
    out = np.empty((tri.shape[0], VERTEX_STRIDE), dtype=np.float32)
    out[:, 0:2] = tri
    out[:, 2:6] = np.asarray(layer.color, dtype=np.float32)
    return out


def frame_vertices(frame: RenderFrame) -> np.ndarray:
    """フレーム全体をレイヤー順に連結した頂点配列 (V, 6) float32 を返す。"""
    parts = [layer_vertices(layer) for layer in frame.layers]
    parts = [p for p in parts if p.shape[0] > 0]
    if not parts:
        return np.empty((0, VERTEX_STRIDE), dtype=np.float32)
    verts = np.ascontiguousarray(np.concatenate(parts, axis=0), dtype=np.float32)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "tessellated frame: layers=%d verts=%d (%.1f KB)",
            len(frame.layers),
            verts.shape[0],
            verts.nbytes / 1024.0,
        )
    return verts


__all__ = ["VERTEX_STRIDE", "fill_triangles", "stroke_triangles", "layer_vertices", "frame_vertices"]
