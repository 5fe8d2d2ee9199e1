"""
どこで: `common.logging`。
何を: ランナー/CLI から 1 度だけ呼ぶ最小ロギング設定ヘルパ。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、設定の責務を入口に寄せるため。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """"INFO"/"debug"/20 などを logging のレベル値へ解決する（不明な名前は INFO）。"""
    if isinstance(level, str):
        return int(getattr(logging, level.strip().upper(), logging.INFO))
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `api.sketch.run_sketch` から呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済み
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


__all__ = ["setup_default_logging", "resolve_level", "LOG_FORMAT"]
