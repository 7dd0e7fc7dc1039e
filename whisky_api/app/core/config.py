"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables, with defaults for every field.  A deployment may also hand
the server a JSON configuration file (``run.py --conf``) whose keys use
dotted names such as ``http.port``; values found there win over the
environment.
"""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


def _env(name: str, default: str) -> Any:
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Whisky API")
    api_version: str = _env("API_VERSION", "1.0.0")
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: str = _env("LOG_FILE", "")

    http_host: str = _env("HTTP_HOST", "0.0.0.0")
    http_port: int = field(default_factory=lambda: int(os.getenv("HTTP_PORT", "8080")))

    # Directory served under ``/assets``.  Relative paths are resolved
    # against the current working directory when the app is built.
    assets_dir: str = _env("ASSETS_DIR", "assets")


# Dotted configuration keys and the ``Settings`` attribute they set.
CONFIG_KEYS: Dict[str, str] = {
    "http.host": "http_host",
    "http.port": "http_port",
    "log.level": "log_level",
    "log.file": "log_file",
    "assets.dir": "assets_dir",
    "project.name": "project_name",
}


def load_settings(conf_path: Optional[str] = None) -> Settings:
    """Build ``Settings`` from the environment and an optional JSON file.

    Unknown keys in the file are ignored with a warning.  A file that
    cannot be read or is not a JSON object raises ``ValueError``.
    """
    settings = Settings()
    if not conf_path:
        return settings

    path = Path(conf_path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")

    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        attr = CONFIG_KEYS.get(key)
        if attr is None:
            logger.warning("Ignoring unknown configuration key '%s'", key)
            continue
        overrides[attr] = int(value) if attr == "http_port" else str(value)
    return replace(settings, **overrides)
