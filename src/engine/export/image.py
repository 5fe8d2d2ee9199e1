"""
どこで: `engine.export.image`。
何を: 現在の描画ウィンドウ内容を PNG として保存するラッパ（最小実装）。
なぜ: ワンアクション（P キー）でスクリーンショットを得られるようにするため。

保存対象はウィンドウのカラーバッファそのもの（HUD を含む見た目どおり）。
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pyglet

from util.paths import ensure_screenshots_dir, unique_path


def default_png_path(width: int, height: int, *, out_dir: Path | None = None) -> Path:
    """`data/screenshot/<timestamp>_<w>x<h>.png` の未使用パスを返す。"""
    base = out_dir if out_dir is not None else ensure_screenshots_dir()
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return unique_path(base / f"{ts}_{int(width)}x{int(height)}.png")


def save_png(window: "pyglet.window.Window", path: Path | None = None) -> Path:
    """現在のウィンドウ内容を PNG として保存する。

    Parameters
    ----------
    window : pyglet.window.Window
        対象ウィンドウ。
    path : Path | None
        出力先パス。None の場合は既定の `data/screenshot/` にタイムスタンプ名で保存。

    Returns
    -------
    Path
        保存先のファイルパス。

    Raises
    ------
    RuntimeError
        バッファの取得や書き込みに失敗した場合。
    """
    if path is None:
        path = default_png_path(window.width, window.height)
    try:
        buffer = pyglet.image.get_buffer_manager().get_color_buffer()
        buffer.save(str(path))
    except Exception as e:  # pyglet が未初期化/ヘッドレスなど
        raise RuntimeError(f"PNG 保存に失敗: {e}") from e
    return path
