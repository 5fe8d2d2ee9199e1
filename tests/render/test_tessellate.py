from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry
from engine.render.tessellate import (
    VERTEX_STRIDE,
    fill_triangles,
    frame_vertices,
    layer_vertices,
    stroke_triangles,
)
from engine.render.types import Layer
from engine.runtime.frame import RenderFrame
from shapes import primitives


def _tri_area(tris: np.ndarray) -> float:
    t = tris.reshape(-1, 3, 2).astype(np.float64)
    a, b, c = t[:, 0], t[:, 1], t[:, 2]
    cross = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    return float(np.sum(np.abs(cross)) * 0.5)


def test_fill_fan_covers_rect_area() -> None:
    tris = fill_triangles(primitives.rect(0.0, 0.0, 10.0, 20.0))
    assert tris.shape == (6, 2)
    assert _tri_area(tris) == pytest.approx(200.0)


def test_fill_skips_degenerate_shapes() -> None:
    g = Geometry.from_lines([[[0, 0], [1, 1]], [[0, 0], [4, 0], [0, 3]]])
    tris = fill_triangles(g)
    assert tris.shape == (3, 2)
    assert _tri_area(tris) == pytest.approx(6.0)
    assert fill_triangles(Geometry.empty()).shape == (0, 2)


def test_stroke_quad_has_requested_thickness() -> None:
    g = Geometry.from_lines([[[0.0, 0.0], [10.0, 0.0]]])
    tris = stroke_triangles(g, 2.0)
    assert tris.shape == (6, 2)
    assert _tri_area(tris) == pytest.approx(20.0)
    assert tris[:, 1].min() == pytest.approx(-1.0)
    assert tris[:, 1].max() == pytest.approx(1.0)


def test_stroke_polyline_and_zero_length_segments() -> None:
    g = Geometry.from_lines([[[0, 0], [0, 0], [0, 5], [5, 5]]])
    tris = stroke_triangles(g, 1.0)
    # 長さ 0 の区間は捨て、残り 2 区間 × 2 三角形
    assert tris.shape == (12, 2)
    assert stroke_triangles(Geometry.from_lines([[[1, 1]]]), 1.0).shape == (0, 2)


def test_layer_vertices_carry_color() -> None:
    color = (0.1, 0.2, 0.3, 0.4)
    v = layer_vertices(Layer(primitives.rect(0, 0, 1, 1), color, "fill"))
    assert v.shape == (6, VERTEX_STRIDE)
    assert v.dtype == np.float32
    assert np.allclose(v[:, 2:], color)


def test_frame_vertices_preserve_layer_order() -> None:
    red = (1.0, 0.0, 0.0, 1.0)
    blue = (0.0, 0.0, 1.0, 1.0)
    frame = RenderFrame.from_layers(
        [
            Layer(primitives.rect(0, 0, 5, 5), red, "fill"),
            Layer(Geometry.empty(), red, "fill"),
            Layer(Geometry.from_lines([[[0, 0], [3, 0]]]), blue, "stroke", thickness=1.0),
        ]
    )
    v = frame_vertices(frame)
    assert v.shape == (12, VERTEX_STRIDE)
    assert v.flags["C_CONTIGUOUS"]
    assert np.allclose(v[:6, 2:], red)
    assert np.allclose(v[6:, 2:], blue)
    assert frame_vertices(RenderFrame()).shape == (0, VERTEX_STRIDE)


def test_layer_rejects_bad_mode_and_thickness() -> None:
    with pytest.raises(ValueError):
        Layer(Geometry.empty(), (0, 0, 0, 1), "dots")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Layer(Geometry.empty(), (0, 0, 0, 1), "stroke", thickness=0.0)
