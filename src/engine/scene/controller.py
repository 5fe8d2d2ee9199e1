"""
どこで: `engine.scene.controller`。
何を: シーン状態（家パーツ・ひび割れ・タイムライン・サイクル角）を所有し、毎フレームの更新とリセットを行う。
なぜ: 散在しがちなグローバル状態を 1 つの SceneState に閉じ込め、リセットを単一メソッドにするため。

スレッド前提:
- `tick` / `reset` / `on_resize` / `on_pointer` はすべて pyglet の同じイベントループから呼ばれる。
- リサイズはビューポート寸法だけを更新し、アニメーション状態には触れない。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from engine.core.clock import Clock
from engine.core.tickable import Tickable
from engine.core.timeline import SqueezeTimeline
from engine.runtime.frame import RenderFrame
from shapes.crack import Crack
from shapes.house import HousePart, create_house_parts

from .ambient import cycle_advance_rate
from .composer import SceneComposer
from .config import SceneConfig

logger = logging.getLogger(__name__)

FrameListener = Callable[[RenderFrame], None]


@dataclass
class SceneState:
    """1 つのアニメーションの可変状態。"""

    timeline: SqueezeTimeline
    parts: tuple[HousePart, ...] = field(default_factory=create_house_parts)
    cracks: list[Crack] = field(default_factory=list)
    cycle_phase: float = 0.0


class SceneController(Tickable):
    """SceneState の所有者。`tick` ごとに 1 フレームを合成して購読者へ渡す。"""

    def __init__(
        self,
        config: SceneConfig | None = None,
        *,
        clock: Clock | None = None,
        rng: np.random.Generator | None = None,
        viewport: tuple[float, float] | None = None,
    ) -> None:
        self.config = config if config is not None else SceneConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.state = SceneState(timeline=SqueezeTimeline(self.config.expand_duration, clock))
        self.composer = SceneComposer(self.config)
        if viewport is None:
            viewport = (float(self.config.window_width), float(self.config.window_height))
        self.viewport: tuple[float, float] = (float(viewport[0]), float(viewport[1]))
        self.pointer: tuple[float, float] = (0.0, 0.0)
        self.latest_frame: RenderFrame | None = None
        self._listeners: list[FrameListener] = []

    # ---- 入力 ----------------------------------------------------------
    def reset(self) -> None:
        """タイムライン・ひび割れ・サイクル角・家パーツを作り直す（冪等）。"""
        self.state.timeline.reset()
        self.state.parts = create_house_parts()
        self.state.cracks = []
        self.state.cycle_phase = 0.0
        logger.info("scene reset")

    def on_resize(self, width: float, height: float) -> None:
        self.viewport = (max(0.0, float(width)), max(0.0, float(height)))
        logger.debug("viewport resized to %dx%d", int(self.viewport[0]), int(self.viewport[1]))

    def on_pointer(self, x: float, y: float) -> None:
        self.pointer = (float(x), float(y))

    def subscribe(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    # ---- 読み取り ------------------------------------------------------
    def squeeze_factor(self) -> float:
        return self.state.timeline.squeeze_factor()

    @property
    def cracks(self) -> list[Crack]:
        return self.state.cracks

    @property
    def cycle_phase(self) -> float:
        return self.state.cycle_phase

    # ---- フレーム ------------------------------------------------------
    def advance_cycle(self, squeeze: float) -> float:
        """サイクル角を 1 フレーム分進め、その進み量を返す。"""
        rate = cycle_advance_rate(
            squeeze, self.config.cycle_base_rate, self.config.cycle_acceleration
        )
        self.state.cycle_phase += rate
        return rate

    def frame(self) -> RenderFrame:
        """サイクル角を進めてから 1 フレームを合成する。"""
        self.advance_cycle(self.squeeze_factor())
        out = self.composer.compose(self.state, self.viewport, self.pointer, self.rng)
        self.latest_frame = out
        return out

    def tick(self, dt: float) -> None:
        frame = self.frame()
        for listener in self._listeners:
            listener(frame)


__all__ = ["SceneController", "SceneState"]
