import pytest

from config import Settings, check_api_keys_on_startup
from exceptions import ConfigurationException


class TestCheckApiKeysOnStartup:

    def test_all_present(self, mock_env_vars):
        assert check_api_keys_on_startup() is None

    def test_missing_key_returns_error(self, missing_api_key):
        error = check_api_keys_on_startup()

        assert isinstance(error, ConfigurationException)
        assert error.details["missing"] == ["GEMINI_API_KEY"]
        assert error.to_dict()["error"] == "ConfigurationException"


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.GEMINI_MODEL == "gemini-2.5-flash"
        assert settings.GEMINI_ENDPOINT == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
        )
        assert settings.REQUEST_TIMEOUT == 60.0

    def test_api_key_alias(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "from_api_key")

        assert Settings(_env_file=None).GEMINI_API_KEY == "from_api_key"

    def test_no_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)

        assert Settings(_env_file=None).GEMINI_API_KEY is None

    def test_origins(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:3000, https://truthlens.app,")

        assert Settings(_env_file=None).origins == ["http://localhost:3000", "https://truthlens.app"]


@pytest.mark.asyncio
class TestLifespan:

    async def test_refuses_to_start_without_key(self, missing_api_key):
        import main

        with pytest.raises(ConfigurationException):
            async with main.lifespan(main.app):
                pass

    async def test_starts_with_key(self, mock_env_vars):
        import main

        async with main.lifespan(main.app):
            pass
