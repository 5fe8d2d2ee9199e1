"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/リサイズ可）と描画・入力コールバック登録を提供。
なぜ: レンダラ/シーン層から GUI 依存を切り離し、最小インターフェイスで統一するため。

座標系:
    pyglet のマウス座標は左下原点・y 上向き。コールバックへは左上原点・y 下向きに変換して渡す。

使用例:
    win = RenderWindow(900, 900)
    win.add_draw_callback(renderer.draw)
    win.add_pointer_callback(controller.on_pointer)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config

PointerCallback = Callable[[float, float], None]
ResizeCallback = Callable[[int, int], None]


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "squeezehouse",
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
            resizable: ユーザーによるリサイズを許可するか。
        """
        # 細いひび割れ線を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=resizable
        )
        self._draw_callbacks: list[Callable[[], None]] = []
        self._pointer_callbacks: list[PointerCallback] = []
        self._click_callbacks: list[PointerCallback] = []
        self._resize_callbacks: list[ResizeCallback] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_pointer_callback(self, func: PointerCallback) -> None:
        """マウス移動/ドラッグ時に (x, y)（左上原点）で呼ばれる関数を登録する。"""
        self._pointer_callbacks.append(func)

    def add_click_callback(self, func: PointerCallback) -> None:
        """マウス押下時に (x, y)（左上原点）で呼ばれる関数を登録する。"""
        self._click_callbacks.append(func)

    def add_resize_callback(self, func: ResizeCallback) -> None:
        """リサイズ時に (width, height) で呼ばれる関数を登録する。"""
        self._resize_callbacks.append(func)

    def to_top_left(self, x: float, y: float) -> tuple[float, float]:
        return float(x), float(self.height) - float(y)

    # ---- pyglet イベント ----
    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_mouse_motion(self, x, y, dx, dy):
        px, py = self.to_top_left(x, y)
        for cb in self._pointer_callbacks:
            cb(px, py)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.on_mouse_motion(x, y, dx, dy)

    def on_mouse_press(self, x, y, button, modifiers):
        px, py = self.to_top_left(x, y)
        for cb in self._click_callbacks:
            cb(px, py)

    def on_resize(self, width, height):
        # 既定ハンドラ（ビューポート設定）を先に実行
        super().on_resize(width, height)
        for cb in self._resize_callbacks:
            cb(int(width), int(height))
