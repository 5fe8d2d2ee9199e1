"""
どこで: `engine.ui`。
何を: 画面上のテキストオーバーレイ（HUD）。
"""
