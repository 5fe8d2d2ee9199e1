"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255）と補間を一元化。
なぜ: YAML 設定・シーン合成・HUD で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def rgb255(r: float, g: float, b: float, a: float = 255.0) -> RGBA:
    """0–255 の成分を RGBA(0–1) にする。"""
    return (
        _clamp01(r / 255.0),
        _clamp01(g / 255.0),
        _clamp01(b / 255.0),
        _clamp01(a / 255.0),
    )


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （全成分 0–1、それ以外は 0–255 とみなす）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[object] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(c) for c in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(comps) == 3:
        comps.append(1.0 if all(0.0 <= c <= 1.0 for c in comps) else 255.0)
    if all(0.0 <= c <= 1.0 for c in comps):
        r, g, b, a = comps
        return (r, g, b, a)
    r, g, b, a = (max(0, min(255, int(round(c)))) for c in comps)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する（pyglet の Label/Shape 用）。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def lerp_color(c0: RGBA, c1: RGBA, t: float) -> RGBA:
    """2 色を成分ごとに線形補間する（t は 0..1 にクランプ）。"""
    u = _clamp01(t)
    return (
        c0[0] + (c1[0] - c0[0]) * u,
        c0[1] + (c1[1] - c0[1]) * u,
        c0[2] + (c1[2] - c0[2]) * u,
        c0[3] + (c1[3] - c0[3]) * u,
    )


__all__ = [
    "parse_hex_color_str",
    "rgb255",
    "normalize_color",
    "to_u8_rgba",
    "lerp_color",
]
