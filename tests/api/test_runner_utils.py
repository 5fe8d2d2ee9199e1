from __future__ import annotations

import numpy as np
import pytest

from api.sketch_runner.utils import build_projection, resolve_fps, resolve_window_size


@pytest.mark.parametrize(
    "requested, expected",
    [(None, 60), (30, 30), (0, 60), (-5, 60), ("24", 24), ("fast", 60)],
)
def test_resolve_fps(requested, expected) -> None:
    assert resolve_fps(requested) == expected


def test_resolve_window_size() -> None:
    assert resolve_window_size(900, 600) == (900, 600)
    with pytest.raises(ValueError):
        resolve_window_size(0, 600)


def test_projection_maps_top_left_pixels_to_clip_space() -> None:
    proj = build_projection(800.0, 600.0)
    assert proj.dtype == np.float32
    # ModernGL は列優先で読むため転置済み → 行ベクトル × proj で変換できる
    def to_clip(x: float, y: float) -> np.ndarray:
        return np.array([x, y, 0.0, 1.0], dtype=np.float32) @ proj

    assert np.allclose(to_clip(0.0, 0.0)[:2], [-1.0, 1.0])
    assert np.allclose(to_clip(800.0, 600.0)[:2], [1.0, -1.0])
    assert np.allclose(to_clip(400.0, 300.0)[:2], [0.0, 0.0])
