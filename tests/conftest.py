"""Shared test fixtures for readme-sync."""

import shutil
from pathlib import Path

import pytest

from readme_sync.manifest.loader import load_manifest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def manifest():
    return load_manifest(FIXTURES / "package.json")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A scratch project root holding copies of the fixture files."""
    shutil.copy(FIXTURES / "package.json", tmp_path / "package.json")
    shutil.copy(FIXTURES / "README.md", tmp_path / "README.md")
    for var in ("READMESYNC_ROOT", "READMESYNC_MANIFEST", "READMESYNC_README"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
