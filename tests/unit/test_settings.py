"""Unit tests for environment-driven settings."""

from pathlib import Path

import pytest

from legal_chat.config.settings import Settings
from legal_chat.core.domain.exceptions import InvalidConfigurationError

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.llm_model == "gemini-2.5-flash"
    assert settings.llm_temperature == 0.1
    assert settings.documents_db_path == Path("./data") / "documents.db"
    assert settings.log_file is None


def test_api_key_is_sanitized(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "\ufeff  secret-key \n")
    assert Settings(_env_file=None).google_api_key == "secret-key"


def test_gemini_api_key_alias(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "from-alias")
    assert Settings(_env_file=None).google_api_key == "from-alias"


def test_ensure_directories(tmp_path):
    settings = Settings(_env_file=None, data_dir=tmp_path / "store")
    settings.ensure_directories()
    assert (tmp_path / "store").is_dir()


def test_data_dir_pointing_at_file_is_rejected(tmp_path):
    not_a_dir = tmp_path / "data"
    not_a_dir.write_text("x")

    with pytest.raises(InvalidConfigurationError):
        Settings(_env_file=None, data_dir=not_a_dir).ensure_directories()
