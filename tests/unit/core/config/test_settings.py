"""Unit tests for settings and reference loading from settings."""

from __future__ import annotations

from datetime import date

from resultpages.core.config.settings import Settings, get_settings
from resultpages.core.server.app import load_reference
from resultpages.domains.health.domain_logic.enumeration import enumerate_slugs


def test_defaults():
    settings = get_settings()
    assert settings.pages_host == "127.0.0.1"
    assert settings.pages_port == 8001
    assert settings.pages_allow_insecure_bind is False
    assert settings.tdee_page_limit == 500


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAGES_PORT", "9100")
    monkeypatch.setenv("TDEE_PAGE_LIMIT", "120")
    settings = get_settings()
    assert settings.pages_port == 9100
    assert settings.tdee_page_limit == 120


def test_default_settings_reuse_packaged_reference(reference):
    assert load_reference(Settings()) is reference


def test_projection_start_override():
    loaded = load_reference(Settings(projection_start_date="2026-01-05"))
    assert loaded.projection_start == date(2026, 1, 5)


def test_invalid_projection_start_is_ignored(reference):
    loaded = load_reference(Settings(projection_start_date="next tuesday"))
    assert loaded.projection_start == reference.projection_start


def test_tdee_limit_override():
    loaded = load_reference(Settings(tdee_page_limit=100))
    assert len(enumerate_slugs("tdee", loaded)) == 100
