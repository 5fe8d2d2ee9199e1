"""
どこで: `engine.render.shader`。
何を: 色付き三角形を描く GLSL プログラムの生成。
なぜ: 画素座標（左上原点・y 下向き）を射影行列だけでクリップ空間へ送るため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec4 in_color;
out vec4 v_color;
void main() {
    v_color = in_color;
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 f_color;
void main() {
    f_color = v_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(mgl_context: Any) -> Any:
        """ModernGL の Program を返す。"""
        return mgl_context.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
