"""
どこで: `effects` パッケージ。
何を: 頂点列へのランダムな揺れ（jitter）。
なぜ: 「押し潰される」震えを形状定義から独立した変換として適用するため。
"""

from .jitter import distortion_magnitude, jitter, jitter_offsets

__all__ = ["distortion_magnitude", "jitter", "jitter_offsets"]
