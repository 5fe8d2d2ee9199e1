from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_lookup_with_normalized_keys() -> None:
    reg = BaseRegistry()

    @reg.register()
    class DayNight:
        pass

    @reg.register("dusty-sky")
    def _fn():
        return 1

    assert reg.get("day_night") is DayNight
    assert reg.get("DayNight") is DayNight
    assert reg.get("dusty_sky") is _fn
    assert reg.list_all() == ["day_night", "dusty_sky"]


def test_duplicate_registration_is_rejected() -> None:
    reg = BaseRegistry()
    reg.register("a")(int)
    reg.register("a")(int)  # 同一オブジェクトは許容
    with pytest.raises(ValueError):
        reg.register("a")(float)


def test_unknown_and_invalid_keys() -> None:
    reg = BaseRegistry()
    with pytest.raises(KeyError):
        reg.get("missing")
    with pytest.raises(ValueError):
        BaseRegistry.normalize_key("  ")
    with pytest.raises(TypeError):
        BaseRegistry.normalize_key(3)  # type: ignore[arg-type]
    assert reg.is_registered(3) is False  # type: ignore[arg-type]
