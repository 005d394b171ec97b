"""Shared text formatting helpers for hashbench.

Provides the aligned tables and headers used by the benchmark report
and the CLI.
"""

from __future__ import annotations


def format_table(
    headers: list[str],
    rows: list[list[str]],
    *,
    alignments: list[str] | None = None,
    indent: int = 2,
) -> str:
    """Format a list of rows as an aligned text table.

    Auto-calculates column widths from content.  Right-aligns columns
    marked ``'r'`` in *alignments*.

    Args:
        headers: Column header strings.
        rows: List of rows, each a list of cell strings.
        alignments: Per-column alignment: ``'l'``, ``'r'``, or ``'c'``.
        indent: Number of leading spaces per line.

    Returns:
        The formatted table as a string.
    """
    if not headers:
        return ""

    ncols = len(headers)
    aligns = list(alignments or [])
    while len(aligns) < ncols:
        aligns.append("l")

    proc_rows: list[list[str]] = []
    for row in rows:
        padded = list(row) + [""] * (ncols - len(row))
        proc_rows.append(padded[:ncols])

    widths = [len(h) for h in headers]
    for row in proc_rows:
        for ci, cell in enumerate(row):
            widths[ci] = max(widths[ci], len(cell))

    prefix = " " * indent

    def _format_cell(text: str, width: int, align: str) -> str:
        if align == "r":
            return text.rjust(width)
        if align == "c":
            return text.center(width)
        return text.ljust(width)

    lines: list[str] = []
    header_line = "  ".join(_format_cell(headers[i], widths[i], aligns[i]) for i in range(ncols))
    lines.append((prefix + header_line).rstrip())

    for row in proc_rows:
        row_line = "  ".join(_format_cell(row[i], widths[i], aligns[i]) for i in range(ncols))
        lines.append((prefix + row_line).rstrip())

    return "\n".join(lines)


def format_section_header(title: str, width: int = 60) -> str:
    """Format a section header: ``'─── Title ──...'``."""
    prefix = "─── "
    suffix_len = width - len(prefix) - len(title) - 1
    suffix = " " + "─" * max(0, suffix_len)
    return prefix + title + suffix
