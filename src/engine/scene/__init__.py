"""
どこで: `engine.scene` サブパッケージ。
何を: squeeze factor を中心に、家の歪み・ひび割れの発生・空の色・装飾を 1 フレームの Layer 列へ合成する。
なぜ: 時間駆動のロジックを純粋な層に閉じ込め、GPU/ウィンドウなしでテストできるようにするため。
"""

from .config import SceneConfig, load_scene_config
from .controller import SceneController, SceneState

__all__ = ["SceneConfig", "load_scene_config", "SceneController", "SceneState"]
