"""Structural checks on a package.json manifest before rendering."""

from collections import Counter
from dataclasses import dataclass, field

COMMAND_REQUIRED = ("title", "description")
PREFERENCE_REQUIRED = ("name", "description")


@dataclass
class ValidationResult:
    """Result of a manifest validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_commands: int = 0
    total_preferences: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [
            f"Manifest Validation: {self.total_commands} command(s), "
            f"{self.total_preferences} preference(s) checked"
        ]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def _check_entries(
    result: ValidationResult,
    kind: str,
    entries: object,
    required: tuple[str, ...],
) -> int:
    if entries is None:
        return 0
    if not isinstance(entries, list):
        result.errors.append(
            f"{kind}: expected a list, got {type(entries).__name__}"
        )
        return 0

    names = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            result.errors.append(f"{kind}[{idx}]: expected an object")
            continue
        label = entry.get("name") or f"{kind}[{idx}]"
        for key in required:
            if key not in entry:
                result.errors.append(f"{label}: missing required field '{key}'")
        if isinstance(entry.get("name"), str) and entry["name"]:
            names.append(entry["name"])

    for name, count in sorted(Counter(names).items()):
        if count > 1:
            result.warnings.append(f"{kind}: name '{name}' declared {count} times")

    return len(entries)


def validate_manifest(manifest: dict) -> ValidationResult:
    """Run structural validation on a manifest dict.

    Checks:
    - commands and preferences, when present, are lists of objects
    - each command has a title and description
    - each preference has a name and description
    - names are unique within each list (warning)
    - at least one command is declared (warning)

    Args:
        manifest: Loaded package.json dict.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    result.total_commands = _check_entries(
        result, "commands", manifest.get("commands"), COMMAND_REQUIRED,
    )
    result.total_preferences = _check_entries(
        result, "preferences", manifest.get("preferences"), PREFERENCE_REQUIRED,
    )

    if manifest.get("commands") in (None, []):
        result.warnings.append("commands: none declared, table will read '**No data**'")

    return result
