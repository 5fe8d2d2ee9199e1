"""
どこで: `common.settings`
何を: `SQH_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

ここで `None` のままの項目は「環境からの上書きなし」を意味し、
`engine.scene.config.load_scene_config` が YAML/既定値を採用する。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_optional_bool, env_str


@dataclass
class _Settings:
    # シーン
    EXPAND_DURATION: float | None = None
    AMBIENT: str | None = None
    SEED: int | None = None
    FPS: int | None = None
    SHOW_HUD: bool | None = None

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 不正値は黙って「上書きなし」に倒す（値の検証は SceneConfig 側で行う）。
    - FPS は 1 未満を 1 に丸める。
    """
    _settings.EXPAND_DURATION = env_float("SQH_EXPAND_DURATION", None)
    _settings.AMBIENT = env_str("SQH_AMBIENT", None)
    _settings.SEED = env_int("SQH_SEED", None)
    _settings.FPS = env_int("SQH_FPS", None, min_value=1)
    _settings.SHOW_HUD = env_optional_bool("SQH_SHOW_HUD")
    _settings.LOG_LEVEL = env_str("SQH_LOG_LEVEL", "INFO") or "INFO"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


def scene_overrides() -> dict[str, object]:
    """環境から与えられた SceneConfig 用の上書きだけを辞書で返す。"""
    s = _settings
    pairs = {
        "expand_duration": s.EXPAND_DURATION,
        "ambient": s.AMBIENT,
        "seed": s.SEED,
        "fps": s.FPS,
        "show_hud": s.SHOW_HUD,
    }
    return {k: v for k, v in pairs.items() if v is not None}


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "scene_overrides", "_Settings"]
