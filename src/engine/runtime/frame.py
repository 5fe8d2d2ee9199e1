"""
どこで: `engine.runtime` の描画ペイロード型。
何を: レンダラへ渡す 1 フレームぶんのデータ（クリア色 + Layer 列 + HUD 用の要約）。
なぜ: シーン合成/レンダラ/HUD 間の契約を明示し、duck-typing を排除するため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from common.types import RGBA
from engine.render.types import Layer


@dataclass(frozen=True)
class FrameInfo:
    """HUD やログが参照するフレームの要約値。"""

    squeeze: float = 0.0
    crack_count: int = 0
    crack_cap: int = 0
    visible_size: float = 0.0
    cycle_phase: float = 0.0


@dataclass(frozen=True)
class RenderFrame:
    """描画対象 1 フレーム分のデータコンテナ（layers は描画順）。"""

    layers: tuple[Layer, ...] = ()
    clear_color: RGBA = (0.0, 0.0, 0.0, 1.0)
    info: FrameInfo = field(default_factory=FrameInfo)

    def layer_names(self) -> list[str | None]:
        return [layer.name for layer in self.layers]

    @classmethod
    def from_layers(
        cls,
        layers: Sequence[Layer],
        *,
        clear_color: RGBA = (0.0, 0.0, 0.0, 1.0),
        info: FrameInfo | None = None,
    ) -> "RenderFrame":
        return cls(layers=tuple(layers), clear_color=clear_color, info=info or FrameInfo())


__all__ = ["RenderFrame", "FrameInfo"]
