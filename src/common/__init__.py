"""
どこで: `common` パッケージ。
何を: ロギング/環境変数/設定/レジストリ/型エイリアスなど層を問わず使う小さな基盤。
なぜ: engine/shapes/effects から再利用する共通部品を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
