import json

import pytest

from whisky_api.app.core.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("HTTP_PORT", "HTTP_HOST", "LOG_LEVEL", "ASSETS_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.http_port == 8080
    assert settings.http_host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.assets_dir == "assets"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HTTP_PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = load_settings()
    assert settings.http_port == 9090
    assert settings.log_level == "DEBUG"


def test_config_file_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HTTP_PORT", "9090")
    conf = tmp_path / "conf.json"
    conf.write_text(json.dumps({"http.port": "8081", "assets.dir": "static", "other": 1}))
    settings = load_settings(str(conf))
    assert settings.http_port == 8081
    assert settings.assets_dir == "static"


def test_config_file_must_be_object(tmp_path):
    conf = tmp_path / "conf.json"
    conf.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_settings(str(conf))


def test_missing_config_file(tmp_path):
    with pytest.raises(ValueError):
        load_settings(str(tmp_path / "absent.json"))
