"""
どこで: `engine.scene.composer`。
何を: 1 フレームの描画内容を固定順序で Layer 列へ合成する SceneComposer。
なぜ: 描画順（背景 → 天体 → 地面 → 家 → ひび割れ → 塵 → 圧力計 → ポインタ）を一箇所で保証するため。

可視領域が 0 のフレームでは内側の描画をすべて省く（ひび割れの発生判定も行わない）。
圧力計は枠の上に重ねるオーバーレイなので、可視領域に関係なく描く。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from engine.core.geometry import Geometry
from engine.render.types import Layer
from engine.runtime.frame import FrameInfo, RenderFrame
from shapes import primitives
from shapes.crack import Crack, crack_segments, segments_by_weight
from util.color import rgb255

from . import decor
from .ambient import AmbientContext, AmbientResolver, get_ambient_resolver
from .config import SceneConfig
from .distortion import distort_parts
from .population import CrackPopulation
from .viewport import VisibleArea, compute_visible_area

if TYPE_CHECKING:
    from .controller import SceneState

CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)
CRACK_COLOR = rgb255(0, 0, 0, 30)


class SceneComposer:
    """SceneState と入力（ビューポート/ポインタ）から RenderFrame を作る。"""

    def __init__(
        self,
        config: SceneConfig,
        *,
        ambient: AmbientResolver | None = None,
        population: CrackPopulation | None = None,
    ) -> None:
        self.config = config
        self.ambient = ambient if ambient is not None else get_ambient_resolver(config.ambient)
        self.population = population or CrackPopulation(
            config.crack_spawn_coeff, config.crack_cap_coeff
        )

    def compose(
        self,
        state: SceneState,
        viewport: tuple[float, float],
        pointer: tuple[float, float],
        rng: np.random.Generator,
    ) -> RenderFrame:
        cfg = self.config
        width, height = viewport
        s = state.timeline.squeeze_factor()
        area = compute_visible_area(width, height, s)
        layers: list[Layer] = []

        if not area.is_empty:
            ctx = AmbientContext(pointer[0], pointer[1], width, height, state.cycle_phase, s)
            sky = self.ambient.resolve(ctx)
            layers.append(
                Layer(primitives.rect(area.x, area.y, area.size, area.size), sky, "fill", name="sky")
            )
            if cfg.show_celestial and self.ambient.uses_cycle:
                layers.extend(decor.celestial_layers(area, state.cycle_phase))
            if cfg.show_grass:
                layers.extend(decor.grass_layers(area, s, rng, max_jitter=cfg.max_jitter))

            polygons = distort_parts(state.parts, area, s, rng, max_jitter=cfg.max_jitter)
            for part, poly in zip(state.parts, polygons):
                layers.append(Layer(Geometry.from_lines([poly]), part.color, "fill", name="house"))

            self.population.step(state.cracks, s, rng)
            layers.extend(self._crack_layers(state.cracks, area, s, rng))

            dust = decor.dust_layer(
                area, s, rng, threshold=cfg.dust_threshold, coeff=cfg.dust_count_coeff
            )
            if dust is not None:
                layers.append(dust)

        if cfg.show_gauge:
            layers.extend(decor.gauge_layers(width, height, s))

        if not area.is_empty:
            layers.append(decor.pointer_layer(area, pointer[0], pointer[1]))

        info = FrameInfo(
            squeeze=s,
            crack_count=len(state.cracks),
            crack_cap=self.population.cap(s),
            visible_size=area.size,
            cycle_phase=state.cycle_phase,
        )
        return RenderFrame.from_layers(layers, clear_color=CLEAR_COLOR, info=info)

    def _crack_layers(
        self,
        cracks: Sequence[Crack],
        area: VisibleArea,
        squeeze: float,
        rng: np.random.Generator,
    ) -> list[Layer]:
        """保存された種から毎フレーム線分木を作り直し、線幅ごとの stroke Layer にする。"""
        segments = []
        for crack in cracks:
            segments.extend(crack_segments(crack, area.size, area.size, squeeze, rng))
        if not segments:
            return []
        layers = []
        for weight, geo in segments_by_weight(segments).items():
            layers.append(
                Layer(
                    geo.translate(area.x, area.y),
                    CRACK_COLOR,
                    "stroke",
                    thickness=weight,
                    name="cracks",
                )
            )
        return layers


__all__ = ["SceneComposer", "CLEAR_COLOR", "CRACK_COLOR"]
