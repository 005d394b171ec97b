"""Terminal display formatting for benchmark results.

Every figure is an exact integer count of nanoseconds; nothing is
scaled to other units or rounded.
"""

from __future__ import annotations

from hashbench.bench.config import TrialConfig
from hashbench.bench.results import OPERATIONS, RunResult, TrialReport
from hashbench.bench.system import format_system_profile
from hashbench.formatting import format_section_header, format_table


def _ordered(names: list[str]) -> list[str]:
    """Known operations in run order, then anything else alphabetically."""
    known = [name for name in OPERATIONS if name in names]
    return known + sorted(name for name in names if name not in OPERATIONS)


def format_config_line(config: TrialConfig) -> str:
    """One-line summary of what a trial measures."""
    return (
        f"Collection: {config.collection} | "
        f"{config.population_size} x {config.elements_per_collection} elements | "
        f"Lookups: {config.lookup_iterations}x | Runs: {config.repeat_count}"
    )


def format_run_totals(config: TrialConfig, result: RunResult) -> str:
    """Compact per-run summary: one summed total per operation.

    Example::

        set: 10000 x 1000 elements | Lookups: 10x
        ----------------------------------------
        create+add :       123456789 ns
        size       :          345678 ns
    """
    width = max([len(name) for name in result] or [0])
    lines = [
        f"{config.collection}: {config.population_size} x "
        f"{config.elements_per_collection} elements | Lookups: {config.lookup_iterations}x",
        "-" * 40,
    ]
    for name in _ordered(list(result)):
        lines.append(f"{name:<{width}s} : {result[name]:>15d} ns")
    return "\n".join(lines)


def format_stats_table(report: TrialReport) -> str:
    """Aligned table of average, stdev, min and max per operation."""
    headers = ["Operation", "Average (ns)", "Stdev (ns)", "Min (ns)", "Max (ns)"]
    rows: list[list[str]] = []
    for name in _ordered(list(report.stats)):
        stats = report.stats[name]
        rows.append(
            [
                name,
                str(stats.average),
                str(stats.standard_deviation),
                str(stats.minimum),
                str(stats.maximum),
            ]
        )
    return format_table(headers, rows, alignments=["l", "r", "r", "r", "r"])


def format_report(report: TrialReport) -> str:
    """Format a complete trial for display.

    Shows the title, system profile, configuration, and the statistics
    table.
    """
    lines: list[str] = []

    title = report.config.title
    lines.append(title)
    lines.append("─" * len(title))
    lines.append("")

    if report.system is not None:
        lines.append(format_system_profile(report.system))
        lines.append("")

    lines.append(format_config_line(report.config))
    if report.start_time and report.end_time:
        lines.append(f"Time: {report.start_time} → {report.end_time}")
    lines.append("")

    lines.append(format_section_header(f"Totals per run ({report.runs_completed} runs)"))
    lines.append(format_stats_table(report))

    return "\n".join(lines)
