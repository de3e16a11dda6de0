# File: tests/conftest.py
# Purpose: Shared pytest fixtures: isolated settings, logging reset, API client
import logging

import pytest
import structlog

from commitgen.config import InvocationConfig, Settings, get_settings

SETTINGS_ENV_VARS = [
    "LLM_ENABLED",
    "LLM_COMMAND",
    "LLM_TIMEOUT_S",
    "LANGUAGE",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_JSON",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # Keep the developer's own environment and .env out of the tests
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_commitgen_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture()
def make_config():
    def _make(command: str, enabled: bool = True, timeout_s: int = 30) -> InvocationConfig:
        return InvocationConfig(enabled=enabled, command=command, timeout_s=timeout_s)

    return _make


@pytest.fixture()
def app_client_factory():
    from fastapi.testclient import TestClient

    from commitgen.server.app import create_app

    def _client(**overrides) -> TestClient:
        values = {"LLM_ENABLED": True, "LLM_COMMAND": "echo 'feat: add new feature'"}
        values.update(overrides)
        return TestClient(create_app(Settings(**values)))

    return _client
