"""
jitter エフェクト（圧迫による震え）

- 各頂点の x/y に独立な一様乱数オフセットを加え、家が押し潰されて震える様子を表す。
- オフセットは `uniform(-d, d) * s`（`d = lerp(0, max_jitter, s)`）。低い s では概ね s² に比例し、
  s = 1 でのみ ±max_jitter に達する。
- 毎フレーム引き直す前提で、結果は保存しない（固定の歪みではなく連続的な「揺れ」になる）。

パラメータ:
- squeeze: 0..1 の squeeze factor。
- max_jitter: 最大変位 [px]（既定 20）。
"""

from __future__ import annotations

import numpy as np

DEFAULT_MAX_JITTER = 20.0


def distortion_magnitude(squeeze: float, max_jitter: float = DEFAULT_MAX_JITTER) -> float:
    """`lerp(0, max_jitter, squeeze)`。"""
    return float(max_jitter) * float(squeeze)


def jitter_offsets(
    n: int,
    squeeze: float,
    rng: np.random.Generator,
    *,
    max_jitter: float = DEFAULT_MAX_JITTER,
) -> np.ndarray:
    """頂点 n 個ぶんのオフセット (n, 2) を返す。各成分は [-max_jitter·s², +max_jitter·s²] 内。"""
    d = distortion_magnitude(squeeze, max_jitter)
    return rng.uniform(-d, d, size=(int(n), 2)) * float(squeeze)


def jitter(
    vertices: np.ndarray,
    squeeze: float,
    rng: np.random.Generator,
    *,
    max_jitter: float = DEFAULT_MAX_JITTER,
) -> np.ndarray:
    """頂点列 (K, 2) に揺れを加えた新しい配列を返す（純関数、入力は変更しない）。"""
    v = np.asarray(vertices, dtype=np.float64)
    if v.size == 0 or squeeze <= 0.0:
        return v.copy()
    return v + jitter_offsets(v.shape[0], squeeze, rng, max_jitter=max_jitter)


__all__ = ["DEFAULT_MAX_JITTER", "distortion_magnitude", "jitter_offsets", "jitter"]
