"""
どこで: `api.sketch`（実行ランナー）。
何を: 設定解決 → SceneController 構築 → pyglet ウィンドウ/ModernGL 描画/HUD/キー入力を結線して実行する。
なぜ: 少ない記述で「押し潰される家」アニメーションを起動し、ヘッドレスでも設定検証だけ行えるようにするため。

実行フロー（概要）:
1) 環境変数（`SQH_*`）を読み込み、ロギングを 1 度だけ設定。
2) 設定解決: 既定値 → `configs/default.yaml`/`config.yaml` の `scene:` → 環境変数 → 明示引数。
3) `SceneController` を生成（乱数は `seed` から 1 つの `numpy.random.Generator` を作る）。
4) `init_only=True` ならここで返す（`pyglet`/`moderngl` は読み込まない）。
5) ウィンドウ/GL: `RenderWindow` と `SceneRenderer` を生成し、アルファ合成を有効化。
6) フレーム駆動: `FrameClock([controller, renderer, hud])` を `pyglet.clock` で `1/fps` 間隔に回す。
   controller が合成した RenderFrame は購読で renderer と HUD に渡る。
7) 入力: マウス移動 → ポインタ、クリック/`R` → リセット、`H` → HUD 切替、`P` → PNG 保存、`ESC` → 終了。
   リサイズはビューポートと投影行列だけを更新する（アニメーション状態は保持）。

例:
    from api import run

    run(ambient="cycle", expand_duration=30, seed=1)

注意/制限:
- ヘッドレス/仮想環境では `pyglet`/`ModernGL` の初期化に失敗する場合がある（その例外はそのまま伝播）。
"""

from __future__ import annotations

import logging
from typing import Any

from common import settings as _settings
from common.logging import setup_default_logging
from engine.core.tickable import Tickable
from engine.scene import SceneConfig, SceneController, load_scene_config
from util.utils import load_config

from .sketch_runner.utils import build_projection, resolve_fps, resolve_window_size

logger = logging.getLogger(__name__)


def run_sketch(
    *,
    ambient: str | None = None,
    expand_duration: float | None = None,
    seed: int | None = None,
    fps: int | None = None,
    show_hud: bool | None = None,
    config: SceneConfig | None = None,
    init_only: bool = False,
    **overrides: Any,
) -> SceneController:
    """アニメーションを実行する（`init_only=True` では構築だけ行い返す）。

    引数:
        ambient: 背景色の決め方（`"quadrant"` / `"cycle"`）。
        expand_duration: 圧縮が完了するまでの秒数。
        seed: 乱数シード（None で非決定的）。
        fps: 描画更新レート。
        show_hud: HUD を表示するか。
        config: 解決済みの SceneConfig（指定時は YAML/環境変数を読まない）。
        init_only: True でウィンドウを開かずに SceneController を返す。
        **overrides: その他の SceneConfig フィールド（例: `window_width=600`）。

    None を渡した引数は「指定なし」として扱う。YAML/環境変数で固定された `seed` を
    解除するには、`seed=None` の SceneConfig を `config` で渡す。

    返り値:
        構築した SceneController（実行後も状態を参照できる）。
    """
    _settings.reload_from_env()
    setup_default_logging(_settings.get().LOG_LEVEL)

    # ---- ① 設定解決 ------------------------------------------------
    if config is None:
        explicit: dict[str, Any] = dict(overrides)
        explicit.update(
            ambient=ambient,
            expand_duration=expand_duration,
            seed=seed,
            fps=fps,
            show_hud=show_hud,
        )
        config = load_scene_config(explicit)
    window_width, window_height = resolve_window_size(config.window_width, config.window_height)
    frame_rate = resolve_fps(config.fps)

    # ---- ② シーン ---------------------------------------------------
    controller = SceneController(config, viewport=(window_width, window_height))
    logger.info(
        "squeezehouse: ambient=%s duration=%.1fs seed=%s fps=%d window=%dx%d",
        config.ambient,
        config.expand_duration,
        config.seed,
        frame_rate,
        window_width,
        window_height,
    )

    # init_only の場合は重い依存を読み込まずに早期リターン
    if init_only:
        return controller

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.export.image import save_png
    from engine.ui.hud import HUDConfig, OverlayHUD

    from .sketch_runner.render import create_window_and_renderer

    # ---- ③ ウィンドウ/GL -------------------------------------------
    rendering_window, mgl_ctx, scene_renderer = create_window_and_renderer(
        window_width, window_height
    )

    # ---- ④ HUD ------------------------------------------------------
    cfg_all = load_config() or {}
    hud_section = cfg_all.get("hud") if isinstance(cfg_all, dict) else None
    overlay = OverlayHUD(
        rendering_window,
        config=HUDConfig.from_mapping(hud_section if isinstance(hud_section, dict) else None),
        visible=config.show_hud,
    )

    # ---- ⑤ 結線 -----------------------------------------------------
    controller.subscribe(scene_renderer.submit)
    controller.subscribe(overlay.on_frame)
    rendering_window.add_draw_callback(scene_renderer.draw)
    rendering_window.add_draw_callback(overlay.draw)
    rendering_window.add_pointer_callback(controller.on_pointer)

    def _reset(*_args: float) -> None:
        controller.reset()
        overlay.show_message("Reset")

    def _resize(width: int, height: int) -> None:
        controller.on_resize(width, height)
        scene_renderer.set_projection(build_projection(width, height))

    rendering_window.add_click_callback(_reset)
    rendering_window.add_resize_callback(_resize)

    # ---- ⑥ FrameClock -----------------------------------------------
    # 順序: 合成 → GPU 転送 → HUD 更新
    tickables: list[Tickable] = [controller, scene_renderer, overlay]
    frame_clock = FrameClock(tickables)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / frame_rate)

    # ---- ⑦ pyglet イベント -----------------------------------------
    def _handle_save_png() -> None:
        try:
            p = save_png(rendering_window)
        except RuntimeError as e:
            overlay.show_message(f"PNG 保存失敗: {e}", level="error")
            return
        overlay.show_message(f"Saved PNG: {p}")

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()
        if sym == key.R:
            _reset()
        if sym == key.H:
            overlay.toggle()
        if sym == key.P:
            _handle_save_png()

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        _closed = getattr(on_close, "_closed", False)
        if _closed:  # type: ignore[truthy-bool]
            return
        pyglet.clock.unschedule(frame_clock.tick)
        try:
            scene_renderer.release()
        except Exception as e:  # GL コンテキスト破棄後など
            logger.debug("renderer release failed: %s", e)
        try:
            mgl_ctx.release()
        except Exception as e:
            logger.debug("moderngl context release failed: %s", e)
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    pyglet.app.run()
    return controller


__all__ = ["run_sketch"]
