"""Shared pytest fixtures for the goprofiles test suite."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def profiles_file(tmp_path: Path, fixtures_dir: Path) -> str:
    """Copies the sample profiles.yaml to a temp directory and returns its path."""
    dest = tmp_path / "profiles.yaml"
    shutil.copy(fixtures_dir / "profiles.yaml", dest)
    return str(dest)


@pytest.fixture
def write_profiles(tmp_path: Path) -> Any:
    """Factory writing a ``goprofiles`` document built from a profiles dict."""

    def factory(profiles: dict[str, Any], name: str = "profiles.yaml") -> str:
        path = tmp_path / name
        path.write_text(yaml.dump({"goprofiles": profiles}, default_flow_style=False))
        return str(path)

    return factory
