"""Load package.json from disk."""

import json
from pathlib import Path

from readme_sync.errors import ManifestError


def load_manifest(path: Path | str) -> dict:
    """Load a package.json manifest.

    Args:
        path: Path to the manifest file.

    Returns:
        Parsed manifest dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the JSON is malformed.
        ManifestError: If the top-level value is not an object.
    """
    manifest_path = Path(path)
    with open(manifest_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} is not a JSON object")

    return data


def _get_list(manifest: dict, key: str) -> list[dict]:
    value = manifest.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ManifestError(
            f"'{key}' must be a list, got {type(value).__name__}"
        )
    return value


def get_commands(manifest: dict) -> list[dict]:
    """Extract the commands array from a manifest.

    Raises:
        ManifestError: If ``commands`` is present but not a list.
    """
    return _get_list(manifest, "commands")


def get_preferences(manifest: dict) -> list[dict]:
    """Extract the preferences array from a manifest.

    Raises:
        ManifestError: If ``preferences`` is present but not a list.
    """
    return _get_list(manifest, "preferences")
