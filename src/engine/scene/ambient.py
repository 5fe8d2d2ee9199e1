"""
どこで: `engine.scene.ambient`。
何を: 可視領域の背景色を決めるリゾルバ群（ポインタの象限 / 昼夜サイクル）と、その名前付きレジストリ。
なぜ: 2 通りの空の表現を同じエンジンの差し替え部品として扱い、設定名で選べるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from common.base_registry import BaseRegistry
from common.types import RGBA
from util.color import lerp_color, rgb255

# 空の 4 色（昼・夕焼け・朝焼け・真夜中）
DAYTIME = rgb255(118, 202, 232)
SUNSET = rgb255(191, 72, 29)
SUNRISE = rgb255(143, 179, 161)
MIDNIGHT = rgb255(19, 38, 82)

TWO_PI = 2.0 * math.pi

_ambient_registry = BaseRegistry()


@dataclass(frozen=True)
class AmbientContext:
    """背景色の決定に使える入力一式。"""

    pointer_x: float
    pointer_y: float
    viewport_width: float
    viewport_height: float
    cycle_phase: float
    squeeze: float


class AmbientResolver(Protocol):
    # True なら太陽/月をサイクル角で描く
    uses_cycle: bool

    def resolve(self, ctx: AmbientContext) -> RGBA: ...


def ambient_resolver(name: str | None = None) -> Callable[[Any], Any]:
    """リゾルバクラスを名前で登録するデコレータ。"""
    return _ambient_registry.register(name)


def get_ambient_resolver(name: str) -> AmbientResolver:
    """登録名からリゾルバのインスタンスを作る（未登録は KeyError）。"""
    return _ambient_registry.get(name)()


def is_ambient_registered(name: str) -> bool:
    return _ambient_registry.is_registered(name)


def list_ambient_resolvers() -> list[str]:
    return _ambient_registry.list_all()


def cycle_advance_rate(squeeze: float, base_rate: float = 0.01, acceleration: float = 5.0) -> float:
    """1 フレームあたりのサイクル角の進み。squeeze が大きいほど昼夜が速く巡る。"""
    return base_rate + squeeze * base_rate * acceleration


@ambient_resolver("quadrant")
class QuadrantResolver:
    """ポインタがビューポートのどの象限にあるかで 4 色から選ぶ。"""

    uses_cycle = False

    def __init__(
        self,
        colors: tuple[RGBA, RGBA, RGBA, RGBA] = (DAYTIME, SUNSET, SUNRISE, MIDNIGHT),
    ) -> None:
        # 順序: 左上, 右上, 左下, 右下
        self.colors = colors

    def resolve(self, ctx: AmbientContext) -> RGBA:
        left = ctx.pointer_x < ctx.viewport_width / 2.0
        top = ctx.pointer_y < ctx.viewport_height / 2.0
        if left and top:
            return self.colors[0]
        if top:
            return self.colors[1]
        if left:
            return self.colors[2]
        return self.colors[3]


@ambient_resolver("cycle")
class CycleResolver:
    """サイクル角に沿って 昼 → 夕焼け → 真夜中 → 朝焼け → 昼 と補間する。"""

    uses_cycle = True

    def __init__(
        self,
        keyframes: tuple[RGBA, ...] = (DAYTIME, SUNSET, MIDNIGHT, SUNRISE),
    ) -> None:
        if len(keyframes) < 2:
            raise ValueError("CycleResolver needs at least 2 keyframes")
        self.keyframes = keyframes

    def resolve(self, ctx: AmbientContext) -> RGBA:
        n = len(self.keyframes)
        pos = (ctx.cycle_phase % TWO_PI) / TWO_PI * n
        i = int(math.floor(pos)) % n
        return lerp_color(self.keyframes[i], self.keyframes[(i + 1) % n], pos - math.floor(pos))


__all__ = [
    "AmbientContext",
    "AmbientResolver",
    "ambient_resolver",
    "get_ambient_resolver",
    "is_ambient_registered",
    "list_ambient_resolvers",
    "cycle_advance_rate",
    "QuadrantResolver",
    "CycleResolver",
    "DAYTIME",
    "SUNSET",
    "SUNRISE",
    "MIDNIGHT",
]
