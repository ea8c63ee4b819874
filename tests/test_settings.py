import logging

import pytest

from settings import get_settings, truthy_env


@pytest.mark.parametrize("value,expected", [(None, True), ("1", True), ("yes", True), ("0", False), ("off", False), ("", False), (" FALSE ", False)])
def test_truthy_env(value, expected):
    assert truthy_env(value) is expected


def test_defaults(monkeypatch):
    monkeypatch.delenv("TODO_ALT_SCREEN", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.alt_screen is True
    assert settings.log_level == logging.WARNING


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TODO_ALT_SCREEN", "no")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.alt_screen is False
    assert settings.log_level == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    assert get_settings().log_level == logging.WARNING
