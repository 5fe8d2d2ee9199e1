"""共通フィクスチャ。

- 乱数シード固定（グローバル/Generator）
- 手動クロックとそれに繋いだ SceneController
"""

from __future__ import annotations

import numpy as np
import pytest

from engine.core.clock import ManualClock
from engine.scene.config import SceneConfig
from engine.scene.controller import SceneController


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def _clean_sqh_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """開発者の環境変数がテストに漏れないようにする。"""
    for name in (
        "SQH_EXPAND_DURATION",
        "SQH_AMBIENT",
        "SQH_SEED",
        "SQH_FPS",
        "SQH_SHOW_HUD",
        "SQH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=100.0)


@pytest.fixture()
def controller(clock: ManualClock, rng: np.random.Generator) -> SceneController:
    cfg = SceneConfig(expand_duration=180.0, seed=12345)
    return SceneController(cfg, clock=clock, rng=rng, viewport=(800.0, 600.0))
