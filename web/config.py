"""
Settings loader for the CV generator.
Reads config/settings.yaml and resolves environment variable references.
"""

import os
from functools import lru_cache
from pathlib import Path

import yaml


DEFAULT_PORT = 3000


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).resolve().parent.parent


def get_settings_path() -> Path:
    """Settings file path, overridable with CV_SETTINGS_PATH."""
    override = os.environ.get("CV_SETTINGS_PATH")
    if override:
        return Path(override)
    return get_project_root() / "config" / "settings.yaml"


@lru_cache(maxsize=1)
def get_settings() -> dict:
    """
    Load settings from settings.yaml.
    Cached for the life of the process; call get_settings.cache_clear()
    after changing the file or CV_SETTINGS_PATH.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, "r", encoding="utf-8") as f:
        settings = yaml.safe_load(f) or {}

    return settings


def get_service_info() -> dict:
    """Service name and version reported by the health endpoint."""
    service = get_settings().get("service", {})
    return {
        "service": service.get("name", "CV Generator"),
        "version": str(service.get("version", "1.0.0")),
    }


def get_port() -> int:
    """
    Get the listening port.
    The env var named by server.port_env wins; otherwise server.default_port.
    """
    server = get_settings().get("server", {})
    port_env = server.get("port_env", "PORT")
    value = os.environ.get(port_env, "")
    if value.strip():
        return int(value)
    return int(server.get("default_port", DEFAULT_PORT))


def get_host() -> str:
    return get_settings().get("server", {}).get("host", "0.0.0.0")


def get_cors_origins() -> list:
    """Allowed CORS origins (default: everything)."""
    return get_settings().get("server", {}).get("cors_origins", ["*"])


def get_log_level() -> str:
    """Log level name; the env var named by logging.level_env overrides the file."""
    logging_config = get_settings().get("logging", {})
    level_env = logging_config.get("level_env", "LOG_LEVEL")
    return os.environ.get(level_env) or logging_config.get("level", "INFO")


def get_organization_config() -> dict:
    return get_settings().get("organization", {})


def get_logo_path() -> Path:
    """Resolve the bundled logo path relative to the project root."""
    path = Path(get_organization_config().get("logo_path", "web/static/logo.svg"))
    if not path.is_absolute():
        path = get_project_root() / path
    return path


def get_upload_limits() -> dict:
    """Upload constraints: max size in bytes and allowed MIME types."""
    uploads = get_settings().get("uploads", {})
    max_size_mb = uploads.get("max_size_mb", 10)
    return {
        "max_size": int(max_size_mb * 1024 * 1024),
        "allowed_types": tuple(uploads.get("allowed_types", ["image/jpeg", "image/png", "image/jpg"])),
    }


def get_renderer_config() -> dict:
    renderer = get_settings().get("renderer", {})
    return {
        "layout": renderer.get("layout", "classic"),
        "timeout_ms": int(renderer.get("timeout_ms", 0)),
        "chromium_args": list(renderer.get("chromium_args", [])),
    }
