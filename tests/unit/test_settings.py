"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prosespell.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.concurrency == 5
        assert settings.language == "en"
        assert settings.max_suggestions == 30
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PROSESPELL_CONCURRENCY", "2")
        monkeypatch.setenv("PROSESPELL_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.concurrency == 2
        assert settings.log_level == "debug"

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("PROSESPELL_MAX_SUGGESTIONS=3\n", encoding="utf-8")
        assert Settings().max_suggestions == 3

    def test_concurrency_must_be_positive(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PROSESPELL_CONCURRENCY", "0")
        with pytest.raises(ValidationError):
            Settings()
