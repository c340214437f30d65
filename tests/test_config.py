"""Tests for loading config from the environment."""

import logging

from onekill.config import Config


def test_defaults(monkeypatch):
    for name in (
        "DISCORD_SECRET",
        "VERSION",
        "DEFAULT_HP_THRESHOLD",
        "DEFAULT_LOW_HP",
        "DEFAULT_HIGH_HP",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("onekill.config.dotenv.load_dotenv", lambda: False)

    config = Config()
    assert config.SECRET == ""
    assert config.DEFAULT_HP_THRESHOLD == "80"
    assert config.DEFAULT_LOW_HP == "7"
    assert config.DEFAULT_HIGH_HP == "5"
    assert config.LOG_LEVEL == logging.INFO


def test_environment_overrides(monkeypatch):
    monkeypatch.setattr("onekill.config.dotenv.load_dotenv", lambda: False)
    monkeypatch.setenv("DISCORD_SECRET", "token")
    monkeypatch.setenv("DEFAULT_LOW_HP", "４")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config()
    assert config.SECRET == "token"
    assert config.DEFAULT_LOW_HP == "４"
    assert config.LOG_LEVEL == logging.DEBUG


def test_unknown_log_level(monkeypatch):
    monkeypatch.setattr("onekill.config.dotenv.load_dotenv", lambda: False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert Config().LOG_LEVEL == logging.INFO
