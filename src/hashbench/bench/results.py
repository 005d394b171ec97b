"""Benchmark result data structures.

Hierarchy::

    TrialReport (one trial: several runs of one configuration)
      → config: TrialConfig
      → system: SystemProfile
      → series: dict[operation name, SampleSeries]   (one sample per run)
      → stats:  dict[operation name, AggregateStats]

    RunResult (one run)
      → totals: dict[operation name, summed sample]
      → sample_counts: dict[operation name, measurements summed]

Reports live in memory only; ``to_dict`` exists for ``--json`` output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from hashbench.bench.config import TrialConfig
from hashbench.bench.stats import AggregateStats, SampleSeries
from hashbench.bench.system import SystemProfile

# Operation names, in the order run_once performs them.
CREATE_ADD = "create+add"
SIZE = "size"
HAS_HIT = "has (hit)"
HAS_MISS = "has (miss)"
ITERATE = "iterate"
DELETE = "delete"
ADD_GROW = "add (grow)"

OPERATIONS: tuple[str, ...] = (
    CREATE_ADD,
    SIZE,
    HAS_HIT,
    HAS_MISS,
    ITERATE,
    DELETE,
    ADD_GROW,
)


# ---------------------------------------------------------------------------
# Run-level result
# ---------------------------------------------------------------------------


@dataclass
class RunResult(Mapping[str, int]):
    """Aggregate sample per operation for one run.

    Behaves as a read-only mapping from operation name to the summed
    nanoseconds for that operation.
    """

    index: int  # 1-based run number
    totals: dict[str, int] = field(default_factory=dict)
    sample_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_series(cls, index: int, series: Mapping[str, SampleSeries]) -> RunResult:
        """Collapse one run's per-measurement series into totals."""
        return cls(
            index=index,
            totals={name: s.total for name, s in series.items()},
            sample_counts={name: len(s) for name, s in series.items()},
        )

    @property
    def elapsed_ns(self) -> int:
        """Sum of all measured time in this run."""
        return sum(self.totals.values())

    def __getitem__(self, name: str) -> int:
        return self.totals[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.totals)

    def __len__(self) -> int:
        return len(self.totals)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "index": self.index,
            "totals": dict(self.totals),
            "sample_counts": dict(self.sample_counts),
        }


# ---------------------------------------------------------------------------
# Trial-level report
# ---------------------------------------------------------------------------


@dataclass
class TrialReport:
    """Everything produced by one trial."""

    config: TrialConfig
    system: SystemProfile | None = None
    series: dict[str, SampleSeries] = field(default_factory=dict)
    stats: dict[str, AggregateStats] = field(default_factory=dict)
    start_time: str = ""
    end_time: str = ""

    @property
    def runs_completed(self) -> int:
        """Number of runs recorded (every series has the same length)."""
        lengths = {len(s) for s in self.series.values()}
        return lengths.pop() if len(lengths) == 1 else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "config": self.config.to_dict(),
            "system": self.system.to_dict() if self.system else None,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "runs_completed": self.runs_completed,
            "operations": {
                name: {
                    "samples": list(self.series[name].samples),
                    **(self.stats[name].to_dict() if name in self.stats else {}),
                }
                for name in self.series
            },
        }
