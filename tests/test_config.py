"""Tests for config.py"""

import logging

import pytest

import config


def test_configure_logging_defaults_to_configured_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    config.configure_logging()
    assert calls["level"] == getattr(logging, config.LOG_LEVEL, logging.INFO)
    assert calls["format"] == config.LOG_FORMAT

    config.configure_logging(None)
    assert calls["level"] == getattr(logging, config.LOG_LEVEL, logging.INFO)

    config.configure_logging("DEBUG")
    assert calls["level"] == logging.DEBUG


def test_numeric_settings(monkeypatch):
    monkeypatch.setenv("GUARDRAIL_FENCED_LINE_LIMIT", "80")
    monkeypatch.setenv("GUARDRAIL_CODE_RATIO", " ")
    assert config._get_int("GUARDRAIL_FENCED_LINE_LIMIT", 60) == 80
    assert config._get_float("GUARDRAIL_CODE_RATIO", 0.35) == 0.35

    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(config.ConfigError, match="PORT"):
        config._get_int("PORT", 3333)


def test_list_settings(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, ,http://b.test")
    assert config._get_list("CORS_ORIGINS", "*") == ["http://a.test", "http://b.test"]
