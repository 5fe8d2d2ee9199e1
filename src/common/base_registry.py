"""
共通レジストリ基底クラス
ambient 色リゾルバなど「名前で差し替える部品」の登録に使う。
"""

import re
from typing import Any, Callable


class BaseRegistry:
    """名前 → オブジェクトの登録簿。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - デコレータは名前省略可。省略時はクラス/関数名から自動推論します。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "DayNight" -> "day_night"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        name = name.strip().replace("-", "_")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """クラス/関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self.normalize_key(name) if name else self.normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録されたクラス/関数を取得。未登録なら KeyError。"""
        key = self.normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録済みの名前をソートして返す。"""
        return sorted(self._registry)

    def is_registered(self, name: str) -> bool:
        try:
            return self.normalize_key(name) in self._registry
        except (TypeError, ValueError):
            return False
