"""Tests for configuration loading."""

import pytest

from youtube_data_mcp.config import Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SERPAPI_KEY", "SERPAPI_BASE_URL", "YDM_REQUEST_TIMEOUT", "YDM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr("youtube_data_mcp.config.settings.load_dotenv", lambda *a, **k: False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.serpapi_key is None
        assert settings.serpapi_base_url == "https://serpapi.com/search.json"
        assert settings.serpapi_engine == "youtube_video"
        assert settings.default_comment_limit == 100
        assert settings.request_timeout is None
        assert not settings.has_credentials

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SERPAPI_KEY", "env-key")
        monkeypatch.setenv("YDM_REQUEST_TIMEOUT", "12.5")

        settings = Settings.from_env()

        assert settings.serpapi_key == "env-key"
        assert settings.request_timeout == 12.5
        assert settings.has_credentials

    def test_missing_key_is_not_fatal(self):
        assert Settings.from_env().serpapi_key is None

    def test_to_dict_hides_key(self):
        assert Settings(serpapi_key="secret").to_dict()["serpapi_key"] == "***"


class TestLoadSettings:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("serpapi_key: file-key\ndefault_lang: ko\nunknown: 1\n", encoding="utf-8")

        settings = load_settings(str(path))

        assert settings.serpapi_key == "file-key"
        assert settings.default_lang == "ko"

    def test_json_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"request_timeout": 3}', encoding="utf-8")

        assert load_settings(str(path)).request_timeout == 3

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yml"
        path.write_text("serpapi_key: file-key\n", encoding="utf-8")
        monkeypatch.setenv("SERPAPI_KEY", "env-key")

        assert load_settings(str(path)).serpapi_key == "env-key"

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(str(path))

    def test_no_file(self):
        assert load_settings().serpapi_key is None
