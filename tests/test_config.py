"""
Testing settings from the environment.
"""

from dataclasses import fields

import pytest

from codebreaker.config import DEFAULT_MAX_ATTEMPTS, Settings, get_settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CODEBREAKER_MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("CODEBREAKER_RELABEL_PATCHED", raising=False)
    monkeypatch.delenv("CODEBREAKER_LOG_LEVEL", raising=False)
    settings = load_settings()
    assert settings.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert settings.relabel_patched is False
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CODEBREAKER_MAX_ATTEMPTS", "250")
    monkeypatch.setenv("CODEBREAKER_RELABEL_PATCHED", "yes")
    monkeypatch.setenv("CODEBREAKER_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.max_attempts == 250
    assert settings.relabel_patched is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["lots", "0", "-3"])
def test_bad_retry_cap(monkeypatch, raw):
    monkeypatch.setenv("CODEBREAKER_MAX_ATTEMPTS", raw)
    with pytest.raises(RuntimeError):
        load_settings()


def test_configure_logging_rejects_unknown_level():
    from codebreaker.config import Settings, configure_logging

    with pytest.raises(RuntimeError):
        configure_logging(Settings(log_level="NOPE"))
    configure_logging(Settings(log_level="DEBUG"))


def test_settings_only_carry_used_knobs():
    assert [f.name for f in fields(Settings)] == ["max_attempts", "relabel_patched", "log_level"]
