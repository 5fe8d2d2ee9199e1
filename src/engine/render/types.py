"""
どこで: `engine.render` 型定義。
何を: 描画レイヤー `Layer`（塗り/線・色・太さ付きの Geometry）。
なぜ: シーン合成（純粋）とレンダラ（GPU）の契約を、描画面に依存しない値で表すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from common.types import RGBA
from engine.core.geometry import Geometry

LayerMode = Literal["fill", "stroke"]


@dataclass(frozen=True)
class Layer:
    """色/太さ付きの描画レイヤー。

    - mode="fill": 各図形を閉じたポリゴンとして塗る。
    - mode="stroke": 各図形を折れ線として太さ `thickness` [px] で描く（閉じない）。
    """

    geometry: Geometry
    color: RGBA
    mode: LayerMode = "fill"
    thickness: float = 1.0
    name: str | None = None

    def __post_init__(self) -> None:
        if self.mode not in ("fill", "stroke"):
            raise ValueError(f"unknown layer mode: {self.mode!r}")
        if self.mode == "stroke" and not self.thickness > 0.0:
            raise ValueError(f"stroke thickness must be > 0, got {self.thickness}")


__all__ = ["Layer", "LayerMode", "RGBA"]
