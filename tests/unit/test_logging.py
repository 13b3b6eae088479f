"""
Unit tests for logging configuration.
They check level resolution and that configuration only happens once per process.
"""

from __future__ import annotations

import logging

import pytest

from src.common import logging as logging_module
from src.common import settings as settings_module


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("verbose", logging.INFO)],
)
def test_resolve_log_level(name: str, expected: int) -> None:
    assert logging_module.resolve_log_level(name) == expected


def test_configure_logging_runs_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(
        logging_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs)
    )
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings_module.get_settings.cache_clear()

    logging_module.configure_logging()
    logging_module.configure_logging()

    settings_module.get_settings.cache_clear()
    assert len(calls) == 1
    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == logging_module.LOG_FORMAT
