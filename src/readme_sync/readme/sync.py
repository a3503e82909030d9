"""README sync — splice rendered tables between section markers.

The sync process:
1. Read the README once
2. For each section, replace the region between its first marker pair
3. Write the README back only if the content changed

Preserves all manually-written content outside the markers.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from readme_sync.readme import SECTIONS


def _marker_pattern(names: tuple[str, ...]) -> re.Pattern:
    alt = "|".join(re.escape(n) for n in names)
    return re.compile(rf"<!-- ({alt}) -->.*?<!-- ({alt}) -->", re.DOTALL)


_PATTERNS = {name: _marker_pattern(names) for name, names in SECTIONS.items()}


def splice_section(content: str, section: str, body: str) -> tuple[str, bool]:
    """Replace the first marker pair of ``section`` with ``body``.

    The original opening and closing marker names are kept. The body is
    surrounded by one blank line on each side.

    Returns:
        (new content, whether the marker pair was found).
    """
    pattern = _PATTERNS[section]

    def _replace(match: re.Match) -> str:
        return f"<!-- {match.group(1)} -->\n\n{body}\n\n<!-- {match.group(2)} -->"

    new_content, count = pattern.subn(_replace, content, count=1)
    return new_content, count > 0


def render_readme(
    content: str,
    tables: dict[str, str],
) -> tuple[str, list[str], list[str]]:
    """Apply every rendered table to README content.

    Args:
        content: Current README text.
        tables: Section name -> rendered table.

    Returns:
        (new content, sections replaced, sections whose markers are absent).
    """
    found = []
    missing = []
    for section, body in tables.items():
        content, ok = splice_section(content, section, body)
        (found if ok else missing).append(section)
    return content, found, missing


def sync_readme(
    readme_path: Path | str,
    tables: dict[str, str],
    dry_run: bool = False,
) -> dict[str, Any]:
    """Splice tables into a README, writing only when something changed.

    Raises:
        FileNotFoundError: If the README doesn't exist.
    """
    path = Path(readme_path)
    # newline="" keeps CRLF line endings outside the markers intact
    with open(path, encoding="utf-8", newline="") as f:
        raw = f.read()
    content, found, missing = render_readme(raw, tables)

    action = "unchanged" if content == raw else "updated"
    if action == "updated" and not dry_run:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    return {
        "path": str(path),
        "action": action,
        "sections": found,
        "missing": missing,
        "dry_run": dry_run,
    }


def sync_project(
    manifest_path: Path | str,
    readme_path: Path | str,
    sections: list[str] | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Load a manifest, render its tables and sync them into the README."""
    from readme_sync.manifest.loader import load_manifest
    from readme_sync.tables.builders import generate_markdown

    manifest = load_manifest(manifest_path)
    tables = generate_markdown(manifest)
    if sections is not None:
        tables = {name: tables[name] for name in sections}
    return sync_readme(readme_path, tables, dry_run)
