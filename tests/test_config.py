"""
Unit tests for config module
"""
import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config after adjusting the environment, without reading .env."""
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **kw: False)

    def _reload():
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


ENV_VARS = [
    "MONGO_URI",
    "DATABASE_NAME",
    "COLLECTION_NAME",
    "SERVER_SELECTION_TIMEOUT_MS",
    "LOG_LEVEL",
]


class TestDefaults:
    """Tests for default configuration values"""

    def test_defaults(self, monkeypatch, reload_config):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        cfg = reload_config()
        assert cfg.MONGO_URI == "mongodb://localhost:27017"
        assert cfg.DATABASE_NAME == "plp_bookstore"
        assert cfg.COLLECTION_NAME == "books"
        assert cfg.SERVER_SELECTION_TIMEOUT_MS == 5000
        assert cfg.LOG_LEVEL == "INFO"


class TestOverrides:
    """Tests for environment overrides"""

    def test_connection_settings(self, monkeypatch, reload_config):
        monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27018")
        monkeypatch.setenv("DATABASE_NAME", "store")
        monkeypatch.setenv("COLLECTION_NAME", "catalog")
        cfg = reload_config()
        assert cfg.MONGO_URI == "mongodb://db.internal:27018"
        assert cfg.DATABASE_NAME == "store"
        assert cfg.COLLECTION_NAME == "catalog"

    def test_timeout_is_int(self, monkeypatch, reload_config):
        monkeypatch.setenv("SERVER_SELECTION_TIMEOUT_MS", "250")
        assert reload_config().SERVER_SELECTION_TIMEOUT_MS == 250

    def test_log_level_is_upper_cased(self, monkeypatch, reload_config):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert reload_config().LOG_LEVEL == "DEBUG"
