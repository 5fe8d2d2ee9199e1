"""
どこで: `util.paths`。
何を: スクリーンショット保存先ディレクトリの生成と解決。
なぜ: ランタイムから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_screenshots_dir(root: Path | None = None) -> Path:
    """スクリーンショット出力先 `data/screenshot/` を作成して返す。

    - 既定ではプロジェクトルート直下に作成する（`root` 指定時はその直下）。
    - 既存の場合もそのまま Path を返す。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "screenshot"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """同名ファイルがあれば `-1`, `-2` ... を付けた未使用パスを返す。"""
    if not path.exists():
        return path
    i = 1
    while True:
        cand = path.parent / f"{path.stem}-{i}{path.suffix}"
        if not cand.exists():
            return cand
        i += 1
