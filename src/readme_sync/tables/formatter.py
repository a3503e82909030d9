"""Column-aligned markdown table formatter."""

from __future__ import annotations

from typing import Sequence

from readme_sync.tables import NO_DATA


def column_widths(rows: Sequence[Sequence[str]], columns: int) -> list[int]:
    """Widest cell per column across all rows. Missing cells count as 0."""
    widths = [0] * columns
    for row in rows:
        for idx in range(columns):
            cell = row[idx] if idx < len(row) else ""
            widths[idx] = max(widths[idx], len(cell or ""))
    return widths


def _format_row(cells: Sequence[str], widths: list[int]) -> str:
    padded = []
    for idx, width in enumerate(widths):
        cell = cells[idx] if idx < len(cells) else ""
        padded.append((cell or "").ljust(width))
    return "| " + " | ".join(padded) + " |"


def format_table(table: Sequence[Sequence[str]]) -> str:
    """Render a table as a fixed-width markdown table.

    The first row is the header. Every cell is left-aligned and padded to
    the widest cell in its column, so all lines share the same column
    boundaries. Short rows are padded with empty cells; cells past the
    header's length are dropped.

    Cells are written as given. Escaping ``|`` and markup characters is
    up to the caller.

    Args:
        table: Header row followed by body rows.

    Returns:
        The rendered table, or ``**No data**`` when ``table`` has no rows.
    """
    if not table:
        return NO_DATA

    header, *body = table
    widths = column_widths(table, len(header))

    lines = [
        _format_row(header, widths),
        "| " + " | ".join("-" * w for w in widths) + " |",
    ]
    lines.extend(_format_row(row, widths) for row in body)
    return "\n".join(lines)
