"""
どこで: `engine.render` の高レベル描画。
何を: 受け取った RenderFrame を色付き三角形へ分解して ModernGL に転送し、画面を描画する。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl as mgl
import numpy as np

from engine.runtime.frame import RenderFrame

from ..core.tickable import Tickable
from .shader import Shader
from .tessellate import frame_vertices
from .triangle_mesh import TriangleMesh


class SceneRenderer(Tickable):
    """
    SceneController から届いた最新フレームを、tick で GPU に送り draw で描く。
    """

    def __init__(self, mgl_context: Any, projection_matrix: np.ndarray):
        self.ctx = mgl_context
        self._logger = logging.getLogger(__name__)
        self.program = Shader.create_shader(mgl_context)
        self.set_projection(projection_matrix)
        self.mesh = TriangleMesh(ctx=mgl_context, program=self.program)
        self._pending: RenderFrame | None = None
        self._clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    # ---- 受け渡し -------------------------------------------------------
    def submit(self, frame: RenderFrame) -> None:
        """次の tick でアップロードするフレームを置く（古い未転送フレームは捨てる）。"""
        self._pending = frame

    def set_projection(self, projection_matrix: np.ndarray) -> None:
        self.program["projection"].write(np.asarray(projection_matrix, dtype="f4").tobytes())

    # ---- Tickable ------------------------------------------------------
    def tick(self, dt: float) -> None:
        """新しいフレームがあれば三角形化して GPU へ転送。"""
        frame = self._pending
        if frame is None:
            return
        self._pending = None
        verts = frame_vertices(frame)
        self.mesh.upload(verts)
        self._clear_color = frame.clear_color

    # ---- 描画 ----------------------------------------------------------
    def draw(self) -> None:
        """GPU に送ったデータを画面に描画"""
        self.ctx.clear(*self._clear_color)
        self.mesh.render(mgl.TRIANGLES)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.mesh.release()
        self.program.release()
