"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptcache.platform.env import MappingEnvProvider


@pytest.fixture
def cargo_home(tmp_path: Path) -> Path:
    """An existing, empty $CARGO_HOME."""
    home = tmp_path / "cargo"
    home.mkdir()
    return home


@pytest.fixture
def cargo_env(cargo_home: Path) -> MappingEnvProvider:
    """Environment with only $CARGO_HOME defined."""
    return MappingEnvProvider({"CARGO_HOME": str(cargo_home)})
