from __future__ import annotations

from engine.core.frame_clock import FrameClock


class _Recorder:
    def __init__(self, name: str, log: list[tuple[str, float]]):
        self.name = name
        self.log = log

    def tick(self, dt: float) -> None:
        self.log.append((self.name, dt))


def test_ticks_in_registration_order_and_counts_frames() -> None:
    log: list[tuple[str, float]] = []
    fc = FrameClock([_Recorder("scene", log), _Recorder("renderer", log), _Recorder("hud", log)])
    fc.tick(0.016)
    fc.tick(0.017)
    assert [n for n, _ in log] == ["scene", "renderer", "hud"] * 2
    assert log[3][1] == 0.017
    assert fc.frame_count == 2


def test_measures_dt_when_not_given() -> None:
    log: list[tuple[str, float]] = []
    fc = FrameClock([_Recorder("a", log)])
    fc.tick()
    assert log[0][1] >= 0.0
