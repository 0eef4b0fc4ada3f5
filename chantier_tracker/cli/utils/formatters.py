"""Output formatting utilities for CLI."""

from typing import Dict, List, Sequence

import click

STAT_LABELS = {
    "total_hours": "Hours worked",
    "total_earnings": "Total earnings",
    "total_expenses": "Total expenses",
    "net_total": "Net total",
}


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: List[str],
    rows: Sequence[Sequence[str]],
    right_align: Sequence[int] = (),
    max_width: int = 60,
) -> str:
    """Format data as a bordered text table.

    Args:
        headers: List of column headers
        rows: Data rows (each row is a sequence of cell values)
        right_align: Indexes of columns to right-align (amounts, durations)
        max_width: Maximum width for each column; longer cells are cut

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells: Sequence[str]) -> str:
        formatted = []
        for i, width in enumerate(col_widths):
            text = str(cells[i]) if i < len(cells) else ""
            text = text[:width]
            if i in right_align:
                formatted.append(f" {text:>{width}} ")
            else:
                formatted.append(f" {text:<{width}} ")
        return "|" + "|".join(formatted) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    table_lines = [separator, render(headers), separator]
    if rows:
        table_lines.extend(render(row) for row in rows)
        table_lines.append(separator)

    return "\n".join(table_lines)


def format_stats(stats: Dict[str, str]) -> str:
    """Format the stats cards (hours, earnings, expenses, net) as lines.

    Args:
        stats: Mapping as returned by Totals.display()

    Returns:
        One "Label: value" line per stat, labels aligned
    """
    width = max(len(label) for label in STAT_LABELS.values())
    lines = []
    for key, label in STAT_LABELS.items():
        if key in stats:
            value = stats[key]
            if key == "net_total":
                value = click.style(value, bold=True)
            lines.append(f"  {label:<{width}} : {value}")
    return "\n".join(lines)
