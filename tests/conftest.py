"""
Shared pytest fixtures.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from whisky_api.app.core.config import Settings
from whisky_api.app.main import create_app
from whisky_api.app.services.whisky_store import WhiskyStore, create_store


@pytest.fixture
def store() -> WhiskyStore:
    """A store holding the two startup whiskies."""
    return create_store(seed=True)


@pytest.fixture
def settings(tmp_path) -> Settings:
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "hello.txt").write_text("hello assets", encoding="utf-8")
    return Settings(assets_dir=str(assets))


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
