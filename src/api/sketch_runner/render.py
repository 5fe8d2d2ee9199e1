"""
どこで: `api.sketch_runner.render`
何を: RenderWindow/ModernGL/SceneRenderer の初期化。
なぜ: `api.sketch` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import moderngl

from .utils import build_projection


def create_window_and_renderer(window_width: int, window_height: int):
    """ウィンドウ/ModernGL/SceneRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, scene_renderer)
    """

    from engine.core.render_window import RenderWindow
    from engine.render.renderer import SceneRenderer

    rendering_window = RenderWindow(window_width, window_height)  # type: ignore[abstract]

    # ModernGL コンテキスト（半透明の塵やひび割れのためにアルファ合成を有効化）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    scene_renderer = SceneRenderer(
        mgl_context=mgl_ctx,
        projection_matrix=build_projection(window_width, window_height),
    )
    return rendering_window, mgl_ctx, scene_renderer


__all__ = ["create_window_and_renderer"]
