"""
どこで: `shapes` パッケージ。
何を: 家のパーツ（矩形/三角形）・ひび割れ木・基本図形（矩形/楕円/軌道点）の生成。
なぜ: 形の定義を純関数として描画から切り離し、単体で検証できるようにするため。
"""

from .crack import Crack, CrackSegment, crack_segments, generate_crack_tree
from .house import HousePart, RectPart, TrianglePart, create_house_parts

__all__ = [
    "Crack",
    "CrackSegment",
    "crack_segments",
    "generate_crack_tree",
    "HousePart",
    "RectPart",
    "TrianglePart",
    "create_house_parts",
]
