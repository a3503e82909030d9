"""Settings resolution for a readme-sync run.

Precedence, first hit wins:
    1. explicit arguments (CLI flags)
    2. environment variables (see ``readme_sync.paths``)
    3. .readme-sync.yaml in the project root
    4. defaults: package.json and README.md in the project root

Example .readme-sync.yaml:

    manifest: extension/package.json
    readme: extension/README.md
    sections: [commands, configs]

Relative paths in the YAML file resolve against the file's directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from readme_sync import paths
from readme_sync.errors import ConfigError
from readme_sync.readme import SECTIONS

CONFIG_KEYS = {"manifest", "readme", "sections"}


@dataclass
class Settings:
    """Resolved locations and sections for one run."""

    manifest: Path
    readme: Path
    sections: list[str] = field(default_factory=lambda: list(SECTIONS))
    config_path: Path | None = None


def load_config(path: Path | str) -> dict:
    """Read and check a .readme-sync.yaml file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ConfigError: If the file is not a mapping or names unknown
            keys or sections.
    """
    config_path = Path(path)
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} is not a YAML mapping")

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigError(
            f"{config_path}: unknown key(s) {', '.join(sorted(unknown))} "
            f"(valid: {', '.join(sorted(CONFIG_KEYS))})"
        )

    sections = data.get("sections")
    if sections is not None:
        if not isinstance(sections, list):
            raise ConfigError(f"{config_path}: 'sections' must be a list")
        bad = [s for s in sections if s not in SECTIONS]
        if bad:
            raise ConfigError(
                f"{config_path}: unknown section(s) {', '.join(map(str, bad))} "
                f"(valid: {', '.join(SECTIONS)})"
            )

    return data


def resolve_settings(
    manifest: Path | str | None = None,
    readme: Path | str | None = None,
    config: Path | str | None = None,
) -> Settings:
    """Resolve manifest/README paths and sections for a run.

    An explicitly given ``config`` must exist; the default
    .readme-sync.yaml is only read when present.
    """
    if config:
        config_path: Path | None = Path(config).expanduser()
    else:
        candidate = paths.default_config_path()
        config_path = candidate if candidate.is_file() else None

    data = load_config(config_path) if config_path else {}
    base = config_path.parent if config_path else paths.project_root()

    def _from_config(key: str) -> Path | None:
        raw = data.get(key)
        return base / Path(str(raw)).expanduser() if raw else None

    manifest_path = (
        (Path(manifest).expanduser() if manifest else None)
        or paths.env_manifest_path()
        or _from_config("manifest")
        or paths.default_manifest_path()
    )
    readme_path = (
        (Path(readme).expanduser() if readme else None)
        or paths.env_readme_path()
        or _from_config("readme")
        or paths.default_readme_path()
    )

    sections = data.get("sections")
    return Settings(
        manifest=manifest_path,
        readme=readme_path,
        sections=list(sections) if sections is not None else list(SECTIONS),
        config_path=config_path,
    )
