"""Tests réglages : lecture des entiers depuis l'environnement."""
import logging

import pytest

from email_composer.core import settings


def test_default_width():
    assert settings.CONTENT_WIDTH == 600


@pytest.mark.parametrize("raw", ["wide", "12.5px", "0", "-40"])
def test_invalid_width_falls_back(monkeypatch, caplog, raw):
    monkeypatch.setenv("EMAIL_COMPOSER_CONTENT_WIDTH", raw)
    with caplog.at_level(logging.WARNING, logger="email_composer.core.settings"):
        assert settings._int_env("EMAIL_COMPOSER_CONTENT_WIDTH", 600) == 600
    assert "EMAIL_COMPOSER_CONTENT_WIDTH" in caplog.text


def test_unset_or_blank_width(monkeypatch):
    monkeypatch.delenv("EMAIL_COMPOSER_CONTENT_WIDTH", raising=False)
    assert settings._int_env("EMAIL_COMPOSER_CONTENT_WIDTH", 600) == 600
    monkeypatch.setenv("EMAIL_COMPOSER_CONTENT_WIDTH", "  ")
    assert settings._int_env("EMAIL_COMPOSER_CONTENT_WIDTH", 600) == 600


def test_valid_width(monkeypatch):
    monkeypatch.setenv("EMAIL_COMPOSER_CONTENT_WIDTH", "640")
    assert settings._int_env("EMAIL_COMPOSER_CONTENT_WIDTH", 600) == 640
