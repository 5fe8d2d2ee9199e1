"""
どこで: `engine.core.timeline`。
何を: リセットからの経過時間を 0→1 の squeeze factor に写像する SqueezeTimeline。
なぜ: 歪み・ひび割れ・空の色がすべて同じ進行度を参照するため、唯一の時間源として切り出す。
"""

from __future__ import annotations

from .clock import Clock, MonotonicClock


class SqueezeTimeline:
    """経過時間 → squeeze factor の線形写像。

    - `elapsed()` は負にならない（時計がリセット時刻より前を返しても 0）。
    - `squeeze_factor()` は `elapsed / expand_duration` を [0, 1] にクランプし、
      所要時間を過ぎたら厳密に 1.0 を返す。
    """

    def __init__(self, expand_duration: float, clock: Clock | None = None) -> None:
        duration = float(expand_duration)
        if not duration > 0.0:
            raise ValueError(f"expand_duration must be > 0, got {expand_duration}")
        self.expand_duration = duration
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._start = self._clock.now()

    @property
    def start_time(self) -> float:
        return self._start

    def reset(self) -> None:
        self._start = self._clock.now()

    def elapsed(self) -> float:
        return max(0.0, self._clock.now() - self._start)

    def squeeze_factor(self) -> float:
        elapsed = self.elapsed()
        if elapsed >= self.expand_duration:
            return 1.0
        return elapsed / self.expand_duration


__all__ = ["SqueezeTimeline"]
