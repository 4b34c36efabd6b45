"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

import config


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the preferences file at a temporary directory."""
    directory = tmp_path / "mcp-sample"
    monkeypatch.setattr(config, "CONFIG_DIR", directory)
    monkeypatch.setattr(config, "CONFIG_FILE", directory / "config.json")
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    return directory


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
