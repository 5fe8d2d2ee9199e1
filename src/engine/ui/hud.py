"""
どこで: `engine.ui.hud` の HUD 表示モジュール。
何を: 圧縮率・ひび割れ数・FPS と一時メッセージを pyglet の Label で左下にオーバーレイ描画する。
なぜ: アニメーションの進み具合を即座に確認できるようにするため。
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Literal, Mapping

import pyglet
from pyglet.window import Window

from engine.core.tickable import Tickable
from engine.runtime.frame import RenderFrame
from util.color import to_u8_rgba

logger = logging.getLogger(__name__)

Level = Literal["info", "warn", "error"]


@dataclass(frozen=True)
class HUDConfig:
    """HUD の見た目。`configs/default.yaml` の `hud:` で上書きできる。"""

    font_name: str = "Arial"
    font_size: int = 10
    text_color: tuple[int, int, int, int] = (255, 255, 255, 200)
    margin_px: int = 10
    line_gap_px: int = 4
    message_seconds: float = 3.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "HUDConfig":
        if not data:
            return cls()
        base = cls()
        font_name = data.get("font_name", base.font_name)
        color = data.get("text_color")
        return cls(
            font_name=str(font_name).strip() or base.font_name,
            font_size=int(data.get("font_size", base.font_size)),
            text_color=to_u8_rgba(color) if color is not None else base.text_color,
            margin_px=int(data.get("margin_px", base.margin_px)),
            line_gap_px=int(data.get("line_gap_px", base.line_gap_px)),
            message_seconds=float(data.get("message_seconds", base.message_seconds)),
        )


def line_offsets(count: int, config: HUDConfig) -> list[int]:
    """下から積んだ各行の y 座標を返す（`lines[i]` は上から i 行目）。"""
    step = config.font_size + config.line_gap_px + 4
    return [config.margin_px + (count - 1 - i) * step for i in range(count)]


def format_status(frame: RenderFrame, fps: float | None = None) -> list[str]:
    """フレーム情報を HUD の行テキストへ整形する（描画と切り離してテスト可能にする）。"""
    info = frame.info
    lines = [
        f"SQUEEZE {info.squeeze * 100.0:5.1f}%",
        f"CRACKS  {info.crack_count}/{info.crack_cap}",
        f"AREA    {info.visible_size:.0f}px",
    ]
    if fps is not None:
        lines.append(f"FPS     {fps:4.1f}")
    return lines


class OverlayHUD(Tickable):
    """最新フレームの状態を pyglet Label で描画する。"""

    def __init__(self, window: Window, *, config: HUDConfig | None = None, visible: bool = True):
        self.window = window
        self._config = config or HUDConfig()
        self.visible = visible
        self._frame: RenderFrame | None = None
        self._labels: list[pyglet.text.Label] = []
        self._active = 0
        self._messages: list[tuple[str, float, Level]] = []
        # FPS は tick の dt から指数平滑で求める
        self._fps: float | None = None

    # ---- 入力 ----------------------------------------------------------
    def on_frame(self, frame: RenderFrame) -> None:
        self._frame = frame

    def toggle(self) -> bool:
        self.visible = not self.visible
        return self.visible

    def show_message(self, text: str, level: Level = "info") -> None:
        """`message_seconds` 秒だけ表示される一時メッセージを積む。"""
        self._messages.append((text, time.monotonic() + self._config.message_seconds, level))
        log = {"info": logger.info, "warn": logger.warning, "error": logger.error}.get(
            level, logger.info
        )
        log("%s", text)

    # ---- Tickable ------------------------------------------------------
    def tick(self, dt: float) -> None:
        if dt > 0:
            inst = 1.0 / dt
            self._fps = inst if self._fps is None else self._fps * 0.9 + inst * 0.1
        now = time.monotonic()
        self._messages = [m for m in self._messages if m[1] > now]
        if not self.visible or self._frame is None:
            self._active = 0
            return
        lines = format_status(self._frame, self._fps) + [m[0] for m in self._messages]
        self._sync_labels(lines)

    def _sync_labels(self, lines: list[str]) -> None:
        """既存の Label を使い回し、行数が増えたときだけ追加で生成する。"""
        cfg = self._config
        while len(self._labels) < len(lines):
            self._labels.append(
                pyglet.text.Label(
                    "",
                    font_name=cfg.font_name,
                    font_size=cfg.font_size,
                    x=cfg.margin_px,
                    y=cfg.margin_px,
                    anchor_x="left",
                    anchor_y="bottom",
                    color=cfg.text_color,
                )
            )
        for label, text, y in zip(self._labels, lines, line_offsets(len(lines), cfg)):
            if label.text != text:
                label.text = text
            if label.y != y:
                label.y = y
        self._active = len(lines)

    def draw(self) -> None:
        if not self.visible:
            return
        for label in self._labels[: self._active]:
            label.draw()
