"""
どこで: `engine.scene.population`。
何を: ひび割れの種を時間とともに確率的に増やす CrackPopulation。
なぜ: 発生確率と上限本数をどちらも squeeze factor に比例させ、見た目の密度を「圧力」に追従させるため。

1 フレームの規則:
- 一様乱数 u を 1 つ引く。
- `u < spawn_coeff × s` かつ `len(cracks) < floor(cap_coeff × s)` のときだけ 1 本追加する。
- 追加以外でリストが変わるのはリセット（全消去）のみ。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from shapes.crack import Crack

logger = logging.getLogger(__name__)

# 種の開始位置は家の本体付近に限定する（相対座標）
START_X_RANGE = (0.2, 0.8)
START_Y_RANGE = (0.2, 0.7)
LENGTH_RANGE = (0.05, 0.2)
BRANCH_CHOICES = (1, 4)  # integers(1, 4) → {1, 2, 3}


class CrackPopulation:
    """ひび割れ種の発生制御。"""

    def __init__(self, spawn_coeff: float = 0.05, cap_coeff: float = 20.0) -> None:
        self.spawn_coeff = float(spawn_coeff)
        self.cap_coeff = float(cap_coeff)

    def cap(self, squeeze: float) -> int:
        """その時点で許される最大本数 `floor(cap_coeff × s)`。"""
        return int(math.floor(self.cap_coeff * max(0.0, squeeze)))

    def spawn_probability(self, squeeze: float) -> float:
        return self.spawn_coeff * squeeze

    def step(self, cracks: list[Crack], squeeze: float, rng: np.random.Generator) -> Crack | None:
        """1 フレーム分の判定を行い、生まれた種を `cracks` に追加して返す（なければ None）。"""
        sample = rng.random()
        if not (sample < self.spawn_probability(squeeze) and len(cracks) < self.cap(squeeze)):
            return None
        crack = new_crack(rng)
        cracks.append(crack)
        logger.debug(
            "crack spawned #%d at (%.2f, %.2f) branches=%d s=%.3f",
            len(cracks),
            crack.start_x,
            crack.start_y,
            crack.branches,
            squeeze,
        )
        return crack


def new_crack(rng: np.random.Generator) -> Crack:
    """一様乱数から新しい種を作る。"""
    return Crack(
        start_x=float(rng.uniform(*START_X_RANGE)),
        start_y=float(rng.uniform(*START_Y_RANGE)),
        length=float(rng.uniform(*LENGTH_RANGE)),
        angle=float(rng.uniform(0.0, math.pi)),
        branches=int(rng.integers(*BRANCH_CHOICES)),
    )


__all__ = ["CrackPopulation", "new_crack"]
