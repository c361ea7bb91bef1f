"""Tests for settings loading and evaluator wiring."""

import pytest
from pydantic import ValidationError

from device_ping.core.config import Settings
from device_ping.core.container import ApplicationContainer


def test_default_ping_timeout():
    assert Settings().ping_timeout_ms == 60_000


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("PING__TIMEOUT_MS", "15000")

    assert Settings().ping_timeout_ms == 15_000


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("PING__TIMEOUT_MS", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_container_builds_evaluator_from_settings(monkeypatch):
    monkeypatch.setenv("PING__TIMEOUT_MS", "2500")

    container = ApplicationContainer(settings=Settings())

    assert container.reachability_evaluator.timeout_ms == 2_500


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./other.db")

    settings = Settings()

    assert settings.database_url == "sqlite+aiosqlite:///./other.db"
    assert "environment" not in Settings.model_fields
