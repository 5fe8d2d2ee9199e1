from __future__ import annotations

import pytest

from common import env, settings


def test_env_int_parses_and_clamps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQH_TEST_INT", "5")
    assert env.env_int("SQH_TEST_INT", 1) == 5
    assert env.env_int("SQH_TEST_INT", 1, min_value=10) == 10
    monkeypatch.setenv("SQH_TEST_INT", "five")
    assert env.env_int("SQH_TEST_INT", 1) == 1
    monkeypatch.setenv("SQH_TEST_INT", "  ")
    assert env.env_int("SQH_TEST_INT", 2) == 2


def test_env_float_rejects_non_finite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQH_TEST_FLOAT", "1.5")
    assert env.env_float("SQH_TEST_FLOAT") == 1.5
    monkeypatch.setenv("SQH_TEST_FLOAT", "nan")
    assert env.env_float("SQH_TEST_FLOAT", 3.0) == 3.0
    monkeypatch.setenv("SQH_TEST_FLOAT", "inf")
    assert env.env_float("SQH_TEST_FLOAT", 3.0) == 3.0


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", False)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("SQH_TEST_BOOL", raw)
    assert env.env_bool("SQH_TEST_BOOL") is expected


def test_env_optional_bool_and_str(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SQH_TEST_OPT", raising=False)
    assert env.env_optional_bool("SQH_TEST_OPT") is None
    monkeypatch.setenv("SQH_TEST_OPT", "true")
    assert env.env_optional_bool("SQH_TEST_OPT") is True
    monkeypatch.setenv("SQH_TEST_STR", "  cycle ")
    assert env.env_str("SQH_TEST_STR") == "cycle"
    monkeypatch.setenv("SQH_TEST_STR", "")
    assert env.env_str("SQH_TEST_STR", "x") == "x"


def test_settings_scene_overrides_only_contains_set_values(monkeypatch: pytest.MonkeyPatch) -> None:
    settings.reload_from_env()
    assert settings.scene_overrides() == {}
    assert settings.get().LOG_LEVEL == "INFO"

    monkeypatch.setenv("SQH_SEED", "11")
    monkeypatch.setenv("SQH_FPS", "0")
    monkeypatch.setenv("SQH_LOG_LEVEL", "debug")
    settings.reload_from_env()
    assert settings.scene_overrides() == {"seed": 11, "fps": 1}
    assert settings.get().LOG_LEVEL == "debug"
    monkeypatch.delenv("SQH_SEED")
    monkeypatch.delenv("SQH_FPS")
    monkeypatch.delenv("SQH_LOG_LEVEL")
    settings.reload_from_env()
