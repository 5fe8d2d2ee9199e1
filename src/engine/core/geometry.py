"""
統合 Geometry 型（2D ピクセル空間）

シーン合成が出力する図形（家のポリゴン、ひび割れの線分、塵の楕円など）は
すべてこの `Geometry` で表現し、レンダラへは `Layer` 単位で受け渡す。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY, 画素, y 下向き）。
- `offsets: int32 ndarray (M+1,)`: 各ポリライン/ポリゴンの開始 index（末尾は必ず N）。
- i 本目の頂点列は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- ポリゴンは閉じた形として扱い、始点の複製は持たない（描画側が最後→最初を結ぶ）。

直感図:

    # 2 つの図形（図形0は4点の矩形、図形1は2点の線分）
    # coords (N=6)
    #   0 [10, 10]  1 [20, 10]  2 [20, 20]  3 [10, 20]
    #   4 [ 0,  0]  5 [ 5,  5]
    # offsets (M+1=3): [0, 4, 6]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`。
- 変換はすべて純関数で、新しいインスタンスを返す。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets は 1 次元配列である必要があります。")
    if offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")

    return coords_arr, offsets_arr


class Geometry:
    """2D 図形集合の統一表現。

    フィールド:
    - `coords (N,2) float32`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各図形の開始 index（末尾は N）。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        norm_coords, norm_offsets = _normalize_geometry_input(coords, offsets)
        self.coords = norm_coords
        self.offsets = norm_offsets

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 2), dtype=np.float32), np.array([0], dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の集合を統一表現に正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は `(K, 2)` の座標列。`list`/`tuple`/`ndarray` いずれも可。

        Raises
        ------
        ValueError
            形状が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float32)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            return cls.empty()

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([arr.shape[0] for arr in np_lines])
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets)

    # ── 基本操作（すべて純粋） ────────
    def lines(self) -> Iterator[np.ndarray]:
        """図形ごとの頂点配列（ビュー）を順に返す。"""
        for i in range(len(self)):
            yield self.coords[self.offsets[i] : self.offsets[i + 1]]

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数）。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        vec = np.array([dx, dy], dtype=np.float32)
        return Geometry(self.coords + vec, self.offsets.copy())

    def __len__(self) -> int:
        """図形数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"
