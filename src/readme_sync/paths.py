"""Project path resolution.

Resolves the manifest and README locations. Uses environment variables
when available, falls back to conventional defaults.

Environment variables:
    READMESYNC_ROOT — project root (default: current working directory)
    READMESYNC_MANIFEST — manifest file (default: <root>/package.json)
    READMESYNC_README — README file (default: <root>/README.md)
"""

from __future__ import annotations

import os
from pathlib import Path

from readme_sync.manifest import MANIFEST_FILENAME
from readme_sync.readme import README_FILENAME

CONFIG_FILENAME = ".readme-sync.yaml"


def project_root() -> Path:
    """Return the project root directory."""
    env = os.environ.get("READMESYNC_ROOT")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def env_manifest_path() -> Path | None:
    """Return the manifest path from the environment, if set."""
    env = os.environ.get("READMESYNC_MANIFEST")
    return Path(env).expanduser() if env else None


def env_readme_path() -> Path | None:
    """Return the README path from the environment, if set."""
    env = os.environ.get("READMESYNC_README")
    return Path(env).expanduser() if env else None


def default_config_path() -> Path:
    """Return the path to .readme-sync.yaml in the project root."""
    return project_root() / CONFIG_FILENAME


def default_manifest_path() -> Path:
    return project_root() / MANIFEST_FILENAME


def default_readme_path() -> Path:
    return project_root() / README_FILENAME
