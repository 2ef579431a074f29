import logging

import pytest

from srtshift.config import load_settings


def test_defaults():
    settings = load_settings()
    assert settings.encoding == "utf-8"
    assert settings.log_level == logging.WARNING


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SRTSHIFT_ENCODING", "cp932")
    monkeypatch.setenv("SRTSHIFT_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.encoding == "cp932"
    assert settings.log_level == logging.DEBUG


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SRTSHIFT_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        load_settings()
