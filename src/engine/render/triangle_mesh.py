"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 色付き頂点の VBO/VAO の確保・更新・解放を担当する TriangleMesh。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class TriangleMesh:
    """
    GPU に色付き三角形の頂点データを送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期 GPU メモリ確保量（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: ModernGL コンテキスト
        program: `in_vert`(2f) と `in_color`(4f) を受け取るシェーダープログラム
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve
        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program, [(self.vbo, "2f 4f", "in_vert", "in_color")]
        )

    def _ensure_capacity(self, nbytes: int) -> None:
        """データが大きくなったら VBO を再確保し、VAO を張り直す。"""
        if nbytes <= self.vbo.size:
            return
        new_size = max(nbytes, self.vbo.size * 2, self.initial_reserve)
        logger.debug("growing vertex buffer: %d -> %d bytes", self.vbo.size, new_size)
        self.vao.release()
        self.vbo.release()
        self.vbo = self.ctx.buffer(reserve=new_size, dynamic=True)
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """(V, 6) float32 の頂点を GPU へ送る。"""
        self.vertex_count = int(vertices.shape[0])
        if self.vertex_count == 0:
            return
        self._ensure_capacity(vertices.nbytes)
        self.vbo.orphan()
        self.vbo.write(vertices.tobytes())

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()
