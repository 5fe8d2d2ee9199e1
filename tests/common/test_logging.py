from __future__ import annotations

import logging

import pytest

from common.logging import LOG_FORMAT, resolve_level, setup_default_logging


@pytest.mark.parametrize(
    "level, expected",
    [("INFO", logging.INFO), ("debug", logging.DEBUG), (" warning ", logging.WARNING), (10, 10), ("nope", logging.INFO)],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


def test_setup_is_noop_when_root_has_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    setup_default_logging("DEBUG")
    assert root.handlers == [handler]
    assert "%(name)s" in LOG_FORMAT
