"""Shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ccswitch.providers import ProviderSettingsStore


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / ".claude"
    path.mkdir()
    return path


@pytest.fixture
def store(config_dir: Path) -> ProviderSettingsStore:
    return ProviderSettingsStore(config_dir)


@pytest.fixture
def read_settings():
    def _read(path: Path) -> dict:
        return json.loads(path.read_text(encoding="utf-8"))

    return _read
