"""
どこで: `engine.runtime` サブパッケージ。
何を: シーン合成の結果（RenderFrame/FrameInfo）を描画・HUD へ受け渡すデータ型を提供。
なぜ: 合成（純粋）と描画（GPU）の境界を不変データ 1 つに絞るため。
"""

from .frame import FrameInfo, RenderFrame

__all__ = ["FrameInfo", "RenderFrame"]
