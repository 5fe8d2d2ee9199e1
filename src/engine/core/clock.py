"""
どこで: `engine.core.clock`。
何を: 単調増加の秒クロック（実時間/手動）を提供する。
なぜ: タイムラインを時計から切り離し、テストで時刻を自由に進められるようにするため。
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """読み取り専用の単調クロック。"""

    def now(self) -> float:
        """現在時刻 [秒] を返す（原点は任意、単調非減少）。"""


class MonotonicClock:
    """`time.perf_counter` による実時間クロック。"""

    def now(self) -> float:
        return time.perf_counter()


class ManualClock:
    """テスト/オフライン描画用の手動クロック。"""

    def __init__(self, start: float = 0.0) -> None:
        self._t = float(start)

    def now(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        self._t += float(dt)

    def set(self, t: float) -> None:
        # 巻き戻しも許す（時計ずれの再現に使う）
        self._t = float(t)


__all__ = ["Clock", "MonotonicClock", "ManualClock"]
