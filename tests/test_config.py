"""Tests for settings loading."""

import pytest

from julesmcp.config import DEFAULT_BASE_URL, Settings, load_settings
from julesmcp.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run in an empty directory with no Jules variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("JULES_API_KEY", "JULES_API_BASE_URL", "JULES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("JULES_API_KEY", "secret")
        monkeypatch.setenv("JULES_LOG_LEVEL", "DEBUG")

        settings = load_settings()

        assert settings.api_key == "secret"
        assert settings.api_base_url == DEFAULT_BASE_URL
        assert settings.log_level == "DEBUG"

    def test_from_dotenv(self, tmp_path):
        (tmp_path / ".env").write_text("JULES_API_KEY=from-file\n")
        assert load_settings().api_key == "from-file"

    def test_missing_key(self):
        with pytest.raises(ConfigError, match="JULES_API_KEY") as exc:
            load_settings()
        assert exc.value.code == "config"

    def test_empty_key(self, monkeypatch):
        monkeypatch.setenv("JULES_API_KEY", "")
        with pytest.raises(ConfigError):
            load_settings()

    def test_settings_without_key(self):
        assert Settings().api_key is None
