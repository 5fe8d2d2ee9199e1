"""
どこで: `engine.render` サブパッケージ。
何を: Layer → 三角形 → GPU 転送・描画の入口。SceneRenderer/TriangleMesh/Shader を提供。
なぜ: シーン合成（純粋）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
