"""
どこで: `api.cli`。
何を: `squeezehouse` コマンド/`python main.py` の引数解析と起動。
なぜ: よく変える値（背景モード・所要時間・シード・FPS）をコマンドラインから上書きできるようにするため。
"""

from __future__ import annotations

import argparse
from typing import Sequence

from engine.scene.ambient import list_ambient_resolvers

from .sketch import run_sketch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="squeezehouse",
        description="A house squeezed by an expanding border, cracking as it goes.",
    )
    parser.add_argument(
        "--ambient",
        choices=list_ambient_resolvers(),
        default=None,
        help="background colour mode (default: from config)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="seconds until the house is fully squeezed",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--fps", type=int, default=None, help="frames per second")
    parser.add_argument("--no-hud", action="store_true", help="hide the HUD overlay")
    parser.add_argument(
        "--init-only",
        action="store_true",
        help="resolve configuration and exit without opening a window",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    run_sketch(
        ambient=args.ambient,
        expand_duration=args.duration,
        seed=args.seed,
        fps=args.fps,
        show_hud=False if args.no_hud else None,
        init_only=args.init_only,
    )
    return 0


__all__ = ["build_parser", "main"]
