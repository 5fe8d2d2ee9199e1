"""
どこで: `engine.core` サブパッケージ。
何を: 2D Geometry・クロック/タイムライン・フレーム駆動（Tickable/FrameClock）・描画ウィンドウ。
なぜ: 時間と図形の基盤を構成し、上位層（scene/render/ui）から再利用可能にするため。
"""
