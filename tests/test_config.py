"""
Smoke tests for settings loading (web/config.py).
"""
import pytest

from web import config


class TestPort:
    def test_default_port(self, monkeypatch, clear_settings_cache):
        monkeypatch.delenv("PORT", raising=False)
        assert config.get_port() == 3000

    def test_env_overrides(self, monkeypatch, clear_settings_cache):
        monkeypatch.setenv("PORT", "8080")
        assert config.get_port() == 8080

    def test_blank_env_falls_back(self, monkeypatch, clear_settings_cache):
        monkeypatch.setenv("PORT", "  ")
        assert config.get_port() == 3000


class TestSettingsFile:
    def test_bundled_settings(self, clear_settings_cache):
        settings = config.get_settings()
        assert "organization" in settings
        assert config.get_service_info()["version"] == "1.0.0"

    def test_override_path(self, tmp_path, monkeypatch, clear_settings_cache):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "server:\n  port_env: CV_PORT\n  default_port: 9000\n"
            "renderer:\n  layout: compact\n  timeout_ms: 1500\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("CV_SETTINGS_PATH", str(path))
        monkeypatch.delenv("CV_PORT", raising=False)
        assert config.get_port() == 9000
        assert config.get_renderer_config()["layout"] == "compact"
        assert config.get_renderer_config()["timeout_ms"] == 1500

    def test_missing_file(self, tmp_path, monkeypatch, clear_settings_cache):
        monkeypatch.setenv("CV_SETTINGS_PATH", str(tmp_path / "nope.yaml"))
        with pytest.raises(FileNotFoundError):
            config.get_settings()

    def test_empty_file_uses_defaults(self, tmp_path, monkeypatch, clear_settings_cache):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        monkeypatch.setenv("CV_SETTINGS_PATH", str(path))
        assert config.get_cors_origins() == ["*"]
        assert config.get_upload_limits()["max_size"] == 10 * 1024 * 1024
        assert config.get_renderer_config()["layout"] == "classic"


class TestValues:
    def test_upload_limits(self, clear_settings_cache):
        limits = config.get_upload_limits()
        assert limits["max_size"] == 10 * 1024 * 1024
        assert "image/png" in limits["allowed_types"]

    def test_log_level_env(self, monkeypatch, clear_settings_cache):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert config.get_log_level() == "DEBUG"

    def test_logo_path_absolute(self, clear_settings_cache):
        path = config.get_logo_path()
        assert path.is_absolute()
        assert path.exists()
