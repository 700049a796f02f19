"""Tests for environment-driven settings."""

from bookshelf.config import Settings


def test_defaults(monkeypatch):
    for name in ("BOOKSHELF_API_PORT", "BOOKSHELF_DATA_PATH", "BOOKSHELF_MASK_ERRORS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.data_path is None
    assert settings.max_body_size == 1024 * 1024
    assert settings.mask_errors is True
    assert settings.max_tokens == 10_000
    assert settings.otel_enabled is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_API_PORT", "8080")
    monkeypatch.setenv("BOOKSHELF_DATA_PATH", "/srv/library.json")
    monkeypatch.setenv("bookshelf_mask_errors", "false")
    monkeypatch.setenv("BOOKSHELF_REQUEST_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.api_port == 8080
    assert settings.data_path == "/srv/library.json"
    assert settings.mask_errors is False
    assert settings.request_timeout == 2.5
