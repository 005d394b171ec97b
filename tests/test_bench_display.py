"""Tests for hashbench.bench.display — terminal report formatting."""

from __future__ import annotations

import unittest

from hashbench.bench.config import TrialConfig
from hashbench.bench.display import (
    format_config_line,
    format_report,
    format_run_totals,
    format_stats_table,
)
from hashbench.bench.results import (
    CREATE_ADD,
    HAS_HIT,
    HAS_MISS,
    OPERATIONS,
    RunResult,
    TrialReport,
)
from hashbench.bench.stats import SampleSeries, summarize
from hashbench.bench.system import SystemProfile


def _report(system: SystemProfile | None = None) -> TrialReport:
    series = {name: SampleSeries(name, [10, 20, 30]) for name in OPERATIONS}
    return TrialReport(
        config=TrialConfig(name="unit", repeat_count=3, population_size=2),
        system=system,
        series=series,
        stats={name: summarize(s) for name, s in series.items()},
        start_time="2026-01-01T00:00:00+0000",
        end_time="2026-01-01T00:00:05+0000",
    )


class TestFormatRunTotals(unittest.TestCase):
    def test_padded_totals(self) -> None:
        config = TrialConfig(population_size=2, elements_per_collection=3, lookup_iterations=1)
        result = RunResult(index=1, totals={name: 7 for name in OPERATIONS})
        lines = format_run_totals(config, result).splitlines()
        self.assertEqual(lines[0], "set: 2 x 3 elements | Lookups: 1x")
        self.assertEqual(lines[1], "-" * 40)
        self.assertEqual(lines[2], f"create+add : {7:>15d} ns")
        self.assertEqual(len(lines), 2 + len(OPERATIONS))

    def test_operations_in_run_order(self) -> None:
        totals = {name: 1 for name in reversed(OPERATIONS)}
        text = format_run_totals(TrialConfig(), RunResult(index=1, totals=totals))
        names = [line.split(" : ")[0].strip() for line in text.splitlines()[2:]]
        self.assertEqual(names, list(OPERATIONS))


class TestFormatStatsTable(unittest.TestCase):
    def test_columns_and_values(self) -> None:
        lines = format_stats_table(_report()).splitlines()
        self.assertIn("Average (ns)", lines[0])
        self.assertIn("Stdev (ns)", lines[0])
        self.assertIn("Min (ns)", lines[0])
        self.assertIn("Max (ns)", lines[0])
        hit = next(line for line in lines if HAS_HIT in line)
        self.assertEqual(hit.split()[-4:], ["20", "8", "10", "30"])

    def test_hit_and_miss_rows(self) -> None:
        text = format_stats_table(_report())
        self.assertIn(HAS_HIT, text)
        self.assertIn(HAS_MISS, text)
        self.assertIn(CREATE_ADD, text)


class TestFormatReport(unittest.TestCase):
    def test_report_sections(self) -> None:
        text = format_report(_report())
        self.assertTrue(text.startswith("unit\n"))
        self.assertIn("Collection: set | 2 x 1000 elements | Lookups: 10x | Runs: 3", text)
        self.assertIn("Totals per run (3 runs)", text)
        self.assertIn("2026-01-01T00:00:05+0000", text)
        self.assertNotIn("System Profile", text)

    def test_report_with_system(self) -> None:
        text = format_report(_report(SystemProfile(python_version="3.13.1")))
        self.assertIn("System Profile", text)

    def test_config_line(self) -> None:
        line = format_config_line(TrialConfig(collection="dict", repeat_count=2))
        self.assertTrue(line.startswith("Collection: dict"))
        self.assertTrue(line.endswith("Runs: 2"))


if __name__ == "__main__":
    unittest.main()
