"""Build the commands and preferences tables from a package.json manifest.

Each builder returns a Table ready for ``format_table``. An absent or
empty source list yields an empty Table (no header either), which the
formatter renders as ``**No data**``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from readme_sync.manifest.loader import get_commands, get_preferences
from readme_sync.tables import Table
from readme_sync.tables.formatter import format_table

COMMANDS_HEADER = ["Title", "Description"]
PREFERENCES_HEADER = ["Key", "Description", "Required", "Default"]

# Order matters: & first so the later entities are not double-escaped
_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("|", "&vert;"),
]


def markdown_escape(text: str) -> str:
    """Escape characters that would break the table grid or read as markup."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def stringify_default(value: Any = None, *, present: bool = True) -> str:
    """Render a preference default the way existing READMEs show it.

    A preference without a ``default`` key renders as ``undefined``;
    JSON literals keep their JSON spelling (``true``, ``false``, ``null``).
    """
    if not present:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, list):
        return ",".join(
            "" if v is None else stringify_default(v) for v in value
        )
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def format_number(value: int | float) -> str:
    """Spell a JSON number the way package.json tooling prints it.

    Whole numbers drop the fraction, magnitudes from 1e-6 up to 1e21 are
    written out in full, anything outside that uses a signed exponent
    (``1e+21``, ``1.5e-7``).
    """
    if isinstance(value, int):
        if abs(value) < 10**21:
            return str(value)
        value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, _, exp = repr(value).partition("e")
    return f"{mantissa}e{int(exp):+d}"


def _code(entry: dict, key: str) -> str:
    # A missing key prints as `undefined`, same as the Default column
    return f"`{stringify_default(entry.get(key), present=key in entry)}`"


def commands_table(commands: list[dict] | None) -> Table:
    """Title/Description rows, one per declared command."""
    if not commands:
        return []

    table = [list(COMMANDS_HEADER)]
    for cmd in commands:
        if not isinstance(cmd, dict):
            continue
        table.append([
            _code(cmd, "title"),
            markdown_escape(str(cmd.get("description", ""))),
        ])
    return table


def preferences_table(preferences: list[dict] | None) -> Table:
    """Key/Description/Required/Default rows, one per declared preference."""
    if not preferences:
        return []

    table = [list(PREFERENCES_HEADER)]
    for pref in preferences:
        if not isinstance(pref, dict):
            continue
        default = stringify_default(pref.get("default"), present="default" in pref)
        table.append([
            _code(pref, "name"),
            markdown_escape(str(pref.get("description", ""))),
            "`Yes`" if pref.get("required") else "`No`",
            markdown_escape(default),
        ])
    return table


def generate_markdown(manifest: dict[str, Any]) -> dict[str, str]:
    """Render both tables for a manifest, keyed by README section name."""
    return {
        "commands": format_table(commands_table(get_commands(manifest))),
        "configs": format_table(preferences_table(get_preferences(manifest))),
    }
