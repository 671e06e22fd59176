"""Shared test fixtures."""

import pytest

from canvas_mcp.config import reset_settings

CANVAS_ENV_VARS = ("CANVAS_API_KEY", "CANVAS_BASE_URL", "CANVAS_DEBUG", "DEBUG")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the developer's environment and config file out of the tests."""
    for var in CANVAS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("canvas_mcp.config.CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
