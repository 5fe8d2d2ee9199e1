"""
どこで: `api` 入口（高レベル公開 API）。
何を: 実行ランナー `run`/`run_sketch` と、シーン構築に使う主要クラスを再輸出。
なぜ: 利用者が単一名前空間から設定 → 実行まで完結できるようにするため。

Usage:
    from api import run

    run(ambient="cycle", expand_duration=60, seed=7)

    # ウィンドウを開かずに状態だけ確認
    controller = run(init_only=True)
    frame = controller.frame()
"""

# コアクラス（高度な使用）
from engine.core.geometry import Geometry
from engine.scene import SceneConfig, SceneController

# 主要API
from .sketch import run_sketch as run
from .sketch import run_sketch as run_sketch

__all__ = [
    "run_sketch",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    # クラス（高度な使用）
    "SceneConfig",
    "SceneController",
    "Geometry",
]

# バージョン情報
__version__ = "0.1.0"
