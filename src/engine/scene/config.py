"""
どこで: `engine.scene.config`。
何を: アニメーション定数（所要時間・揺れ幅・ひび割れ係数・塵の閾値など）の不変設定と、その読み込み。
なぜ: 既定値 → YAML → 環境変数 → 明示引数 の優先順位を一箇所で解決し、起動時に検証するため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from common import settings as _settings
from util.utils import load_config

from .ambient import is_ambient_registered, list_ambient_resolvers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneConfig:
    """シーン設定（実行中は不変）。

    Parameters
    ----------
    expand_duration : float
        squeeze factor が 0 → 1 に達するまでの秒数（> 0）。
    max_jitter : float
        squeeze factor = 1 での最大の揺れ [px]。
    crack_spawn_coeff : float
        1 フレームでひび割れが生まれる確率の係数（確率 = 係数 × s）。
    crack_cap_coeff : float
        ひび割れ本数の上限係数（上限 = floor(係数 × s)）。
    dust_threshold : float
        s がこれを **超えた** ときだけ塵を描く。
    dust_count_coeff : float
        塵の粒数係数（粒数 = floor(s × 係数)）。
    cycle_base_rate, cycle_acceleration : float
        昼夜サイクル角の 1 フレームあたりの進み `base + s × base × acceleration`。
    ambient : str
        背景色リゾルバ名（"quadrant" / "cycle"）。
    """

    expand_duration: float = 180.0
    max_jitter: float = 20.0
    crack_spawn_coeff: float = 0.05
    crack_cap_coeff: float = 20.0
    dust_threshold: float = 0.4
    dust_count_coeff: float = 50.0
    cycle_base_rate: float = 0.01
    cycle_acceleration: float = 5.0
    ambient: str = "quadrant"
    show_celestial: bool = True
    show_grass: bool = True
    show_gauge: bool = True
    show_hud: bool = True
    fps: int = 60
    seed: int | None = None
    window_width: int = 900
    window_height: int = 900

    def __post_init__(self) -> None:
        if not float(self.expand_duration) > 0.0:
            raise ValueError(f"expand_duration must be > 0, got {self.expand_duration}")
        for name in (
            "max_jitter",
            "crack_spawn_coeff",
            "crack_cap_coeff",
            "dust_count_coeff",
            "cycle_base_rate",
            "cycle_acceleration",
        ):
            if float(getattr(self, name)) < 0.0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if not 0.0 <= float(self.dust_threshold) <= 1.0:
            raise ValueError(f"dust_threshold must be within [0, 1], got {self.dust_threshold}")
        if int(self.fps) < 1:
            raise ValueError(f"fps must be >= 1, got {self.fps}")
        if int(self.window_width) <= 0 or int(self.window_height) <= 0:
            raise ValueError(
                f"window size must be positive, got {(self.window_width, self.window_height)}"
            )
        if not is_ambient_registered(self.ambient):
            allowed = ", ".join(list_ambient_resolvers())
            raise ValueError(f"unknown ambient resolver: {self.ambient!r}; allowed={allowed}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: "SceneConfig | None" = None) -> "SceneConfig":
        """辞書から設定を作る。未知キーは警告して無視し、既知キーは型を揃えて上書きする。"""
        start = base if base is not None else cls()
        known = {f.name: f for f in fields(cls)}
        updates: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("unknown scene config key ignored: %s", key)
                continue
            updates[key] = _coerce(key, value, getattr(start, key))
        return replace(start, **updates) if updates else start


def _coerce(key: str, value: Any, current: Any) -> Any:
    """YAML/環境変数から来た値を既定値の型へ寄せる。変換できなければ ValueError。"""
    if value is None:
        if key == "seed":
            return None
        raise ValueError(f"scene config '{key}' must not be null")
    try:
        if isinstance(current, bool) or key.startswith("show_"):
            if isinstance(value, str):
                return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return bool(value)
        if key in ("fps", "window_width", "window_height", "seed"):
            return int(value)
        if key == "ambient":
            return str(value)
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid value for scene config '{key}': {value!r}") from e


def load_scene_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    root: Path | None = None,
    use_env: bool = True,
) -> SceneConfig:
    """既定値 → YAML(`scene:`) → 環境変数(`SQH_*`) → `overrides` の順に重ねて SceneConfig を返す。

    `overrides` の値が None のキーは「指定なし」として読み飛ばす。そのため YAML や環境変数で
    設定された `seed` を `overrides` で None に戻すことはできない。戻したい場合は返り値に
    `SceneConfig.from_mapping({"seed": None}, base=cfg)` を適用する。
    """
    cfg = SceneConfig.from_mapping({})  # 既定値（ambient 名の検証を含む）

    raw = load_config(root) or {}
    scene_section = raw.get("scene", {}) if isinstance(raw, dict) else {}
    if isinstance(scene_section, dict) and scene_section:
        logger.debug("scene config from yaml: %s", sorted(scene_section))
        cfg = SceneConfig.from_mapping(scene_section, base=cfg)
    elif scene_section:
        logger.warning("'scene' section in config must be a mapping; ignored")

    if use_env:
        _settings.reload_from_env()
        env_part = _settings.scene_overrides()
        if env_part:
            logger.debug("scene config from env: %s", sorted(env_part))
            cfg = SceneConfig.from_mapping(env_part, base=cfg)

    if overrides:
        explicit = {k: v for k, v in overrides.items() if v is not None}
        cfg = SceneConfig.from_mapping(explicit, base=cfg)
    return cfg


__all__ = ["SceneConfig", "load_scene_config"]
