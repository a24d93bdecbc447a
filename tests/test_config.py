from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dictsearch.config import Settings, load_settings
from dictsearch.dictionary import DEFAULT_RESOURCE_PATH


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DICTSEARCH_RESOURCE_PATH", "DICTSEARCH_LOG_LEVEL", "DICTSEARCH_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    cfg = load_settings()
    assert cfg.resource_path == DEFAULT_RESOURCE_PATH
    assert cfg.log_level == "INFO"
    assert cfg.log_level_value == logging.INFO
    assert cfg.cors_origins == ["*"]


def test_env_parsing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DICTSEARCH_RESOURCE_PATH", str(tmp_path / "words.json"))
    monkeypatch.setenv("DICTSEARCH_LOG_LEVEL", "debug")
    monkeypatch.setenv("DICTSEARCH_CORS_ORIGINS", "http://a.test, http://b.test,")

    cfg = load_settings()

    assert cfg.resource_path == tmp_path / "words.json"
    assert cfg.log_level == "DEBUG"
    assert cfg.log_level_value == logging.DEBUG
    assert cfg.cors_origins == ["http://a.test", "http://b.test"]


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DICTSEARCH_LOG_LEVEL", "ERROR")
    cfg = load_settings(log_level="warning", resource_path="other.json")
    assert cfg.log_level == "WARNING"
    assert cfg.resource_path == Path("other.json")


def test_invalid_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DICTSEARCH_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        load_settings()


def test_unknown_override_key_raises() -> None:
    with pytest.raises(TypeError):
        load_settings(not_a_real_key=True)


def test_settings_dataclass_defaults_are_independent() -> None:
    a, b = Settings(), Settings()
    a.cors_origins.append("http://x.test")
    assert b.cors_origins == ["*"]
