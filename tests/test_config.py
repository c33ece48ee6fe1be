from __future__ import annotations

import pytest

from guardagainst.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GUARDAGAINST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GUARDAGAINST_EXPOSE_VALUES", raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.expose_values is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDAGAINST_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GUARDAGAINST_EXPOSE_VALUES", "False")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.expose_values is False


def test_blank_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDAGAINST_LOG_LEVEL", "  ")
    assert Settings.from_env().log_level == "INFO"
