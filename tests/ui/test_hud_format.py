from __future__ import annotations

import pytest

from engine.runtime.frame import FrameInfo, RenderFrame

try:
    from engine.ui import hud as hud_mod
    from engine.ui.hud import HUDConfig, OverlayHUD, format_status, line_offsets
except Exception as e:  # pyglet がディスプレイなしで読み込めない環境
    pytest.skip(f"pyglet unavailable: {e}", allow_module_level=True)


def test_format_status_lines() -> None:
    frame = RenderFrame(info=FrameInfo(squeeze=0.5, crack_count=3, crack_cap=10, visible_size=300.0))
    lines = format_status(frame, fps=59.94)
    assert lines[0].startswith("SQUEEZE") and "50.0%" in lines[0]
    assert "3/10" in lines[1]
    assert "300px" in lines[2]
    assert lines[3].startswith("FPS") and "59.9" in lines[3]
    assert len(format_status(frame)) == 3


def test_hud_config_from_mapping() -> None:
    assert HUDConfig.from_mapping(None) == HUDConfig()
    cfg = HUDConfig.from_mapping({"font_size": "14", "text_color": "#000000", "font_name": "  "})
    assert cfg.font_size == 14
    assert cfg.text_color == (0, 0, 0, 255)
    assert cfg.font_name == HUDConfig().font_name


def test_line_offsets_stack_bottom_up() -> None:
    cfg = HUDConfig(font_size=10, line_gap_px=4, margin_px=10)
    ys = line_offsets(3, cfg)
    # 最終行が一番下（margin）、上の行ほど y が大きい
    assert ys == [46, 28, 10]
    assert line_offsets(0, cfg) == []


class _FakeLabel:
    created = 0

    def __init__(self, text: str = "", **kwargs) -> None:  # noqa: ANN003
        type(self).created += 1
        self.text = text
        self.y = kwargs.get("y", 0)
        self.drawn = 0

    def draw(self) -> None:
        self.drawn += 1


def test_labels_are_reused_across_ticks(monkeypatch: pytest.MonkeyPatch) -> None:
    _FakeLabel.created = 0
    monkeypatch.setattr(hud_mod.pyglet.text, "Label", _FakeLabel)
    overlay = OverlayHUD(None, visible=True)  # type: ignore[arg-type]
    frame = RenderFrame(info=FrameInfo(squeeze=0.1, crack_cap=2, visible_size=10.0))
    overlay.on_frame(frame)

    for _ in range(30):
        overlay.tick(1 / 60)
    assert _FakeLabel.created == 4  # 3 状態行 + FPS

    overlay.show_message("hello")
    overlay.tick(1 / 60)
    assert _FakeLabel.created == 5
    assert overlay._labels[4].text == "hello"

    # メッセージが消えても Label は再生成されず、描画数だけ減る
    overlay._messages.clear()
    overlay.tick(1 / 60)
    overlay.draw()
    assert _FakeLabel.created == 5
    assert [lab.drawn for lab in overlay._labels] == [1, 1, 1, 1, 0]


def test_hidden_overlay_draws_nothing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hud_mod.pyglet.text, "Label", _FakeLabel)
    overlay = OverlayHUD(None, visible=True)  # type: ignore[arg-type]
    overlay.on_frame(RenderFrame(info=FrameInfo()))
    overlay.tick(1 / 60)
    overlay.toggle()
    overlay.tick(1 / 60)
    overlay.toggle()
    overlay.draw()
    assert all(lab.drawn == 0 for lab in overlay._labels)
