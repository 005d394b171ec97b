"""Timed-trial execution engine.

A trial is ``repeat_count`` runs of the same benchmark body.  Each run:

1. Builds a population of ``population_size`` collections, timing the
   creation and bulk insert of ``elements_per_collection`` members into
   each one.
2. Times a size query on every collection.
3. Times ``lookup_iterations`` passes of hit lookups (a key known to be
   present) and, separately, of miss lookups (a key known to be absent).
4. Times a full traversal of every collection.
5. Times one deletion and one insertion into every collection.

Within a run each sub-benchmark sums its samples over the population;
across runs, those sums form one :class:`SampleSeries` per operation,
which is finally reduced to integer statistics.

Member keys for collection ``i`` are ``i*E .. i*E + E - 1``.  Miss keys
are ``-1 - i`` and rely on members being non-negative (see
:mod:`hashbench.bench.adapters`).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from hashbench.bench.adapters import CollectionAdapter, get_collection
from hashbench.bench.config import InvalidConfiguration, TrialConfig, check_config
from hashbench.bench.display import format_run_totals
from hashbench.bench.results import (
    ADD_GROW,
    CREATE_ADD,
    DELETE,
    HAS_HIT,
    HAS_MISS,
    ITERATE,
    OPERATIONS,
    SIZE,
    RunResult,
    TrialReport,
)
from hashbench.bench.stats import AggregateStats, SampleSeries, summarize
from hashbench.bench.system import capture_system_profile
from hashbench.bench.timing import Clock, get_clock, measure
from hashbench.logging import get_logger

log = get_logger("bench.runner")


# ---------------------------------------------------------------------------
# Progress callback
# ---------------------------------------------------------------------------


@dataclass
class TrialProgress:
    """Progress info passed to the callback after each run."""

    run_index: int  # 1-based
    runs_total: int
    result: RunResult

    @property
    def elapsed_ns(self) -> int:
        return self.result.elapsed_ns


ProgressCallback = Callable[[TrialProgress], None]


# ---------------------------------------------------------------------------
# TrialRunner
# ---------------------------------------------------------------------------


class TrialRunner:
    """Executes a benchmark trial according to a TrialConfig.

    Usage::

        runner = TrialRunner(TrialConfig(collection="dict", repeat_count=10))
        report = runner.run()

    *collection* and *clock* override the adapter and clock named in the
    config; tests use them to inject fakes.
    """

    def __init__(
        self,
        config: TrialConfig,
        *,
        collection: CollectionAdapter | None = None,
        clock: Clock | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self.config = config
        self._collection = collection
        self._clock = clock
        self.progress: ProgressCallback = progress_callback or self._default_progress

    @property
    def collection(self) -> CollectionAdapter:
        if self._collection is None:
            try:
                self._collection = get_collection(self.config.collection)
            except ValueError as exc:
                raise InvalidConfiguration(str(exc)) from exc
        return self._collection

    @property
    def clock(self) -> Clock:
        if self._clock is None:
            try:
                self._clock = get_clock(self.config.clock)
            except ValueError as exc:
                raise InvalidConfiguration(str(exc)) from exc
        return self._clock

    # -- measurement --------------------------------------------------------

    def measure(self, operation: Callable[[], Any]) -> int:
        """Time one invocation of *operation* with the configured clock."""
        return measure(operation, self.clock)

    # -- a single run ---------------------------------------------------------

    def run_once(self, index: int = 1) -> RunResult:
        """Execute one full pass of the benchmark body.

        Returns the summed sample of each operation for this run.  Any
        exception from the collection or the clock propagates and the
        run produces no result.
        """
        series = {name: SampleSeries(name) for name in OPERATIONS}

        population: list[Any] = []
        self._bench_create(population, series[CREATE_ADD])
        self._bench_size(population, series[SIZE])
        self._bench_has_hit(population, series[HAS_HIT])
        self._bench_has_miss(population, series[HAS_MISS])
        self._bench_iterate(population, series[ITERATE])
        self._bench_delete(population, series[DELETE])
        self._bench_add_grow(population, series[ADD_GROW])

        return RunResult.from_series(index, series)

    def _bench_create(self, population: list[Any], series: SampleSeries) -> None:
        adapter = self.collection
        count = self.config.elements_per_collection
        built: list[Any] = [None]

        def build(base: int) -> None:
            coll = adapter.create()
            for value in range(base, base + count):
                adapter.insert(coll, value)
            built[0] = coll

        for i in range(self.config.population_size):
            series.append(self.measure(partial(build, i * count)))
            population.append(built[0])
        log.debug("Built %d collections of %d elements", len(population), count)

    def _bench_size(self, population: list[Any], series: SampleSeries) -> None:
        size = self.collection.size
        for coll in population:
            series.append(self.measure(partial(size, coll)))

    def _bench_has_hit(self, population: list[Any], series: SampleSeries) -> None:
        contains = self.collection.contains
        count = self.config.elements_per_collection
        for _ in range(self.config.lookup_iterations):
            for i, coll in enumerate(population):
                key = i * count + count // 2
                series.append(self.measure(partial(contains, coll, key)))

    def _bench_has_miss(self, population: list[Any], series: SampleSeries) -> None:
        contains = self.collection.contains
        for _ in range(self.config.lookup_iterations):
            for i, coll in enumerate(population):
                key = -1 - i
                series.append(self.measure(partial(contains, coll, key)))

    def _bench_iterate(self, population: list[Any], series: SampleSeries) -> None:
        traverse = self.collection.traverse
        for coll in population:
            series.append(self.measure(partial(traverse, coll)))

    def _bench_delete(self, population: list[Any], series: SampleSeries) -> None:
        delete = self.collection.delete
        count = self.config.elements_per_collection
        for i, coll in enumerate(population):
            series.append(self.measure(partial(delete, coll, i * count)))

    def _bench_add_grow(self, population: list[Any], series: SampleSeries) -> None:
        insert = self.collection.insert
        first_new = self.config.population_size * self.config.elements_per_collection
        for i, coll in enumerate(population):
            series.append(self.measure(partial(insert, coll, first_new + i)))

    # -- repeated runs --------------------------------------------------------

    def run_many(self, repeat_count: int | None = None) -> dict[str, SampleSeries]:
        """Run the benchmark body *repeat_count* times.

        Defaults to ``config.repeat_count``.  Returns one series per
        operation, each holding exactly one summed sample per run, in
        run order.

        Raises:
            InvalidConfiguration: Before any run starts, if the repeat
                count or the configuration is invalid.
        """
        return self._collect(self._resolve_runs(repeat_count))

    def _resolve_runs(self, repeat_count: int | None) -> int:
        if repeat_count is not None and (
            isinstance(repeat_count, bool) or not isinstance(repeat_count, int) or repeat_count < 1
        ):
            raise InvalidConfiguration(f"Repeat count must be at least 1 (got {repeat_count!r}).")
        check_config(self.config)
        return self.config.repeat_count if repeat_count is None else repeat_count

    def _collect(self, runs: int) -> dict[str, SampleSeries]:
        series = {name: SampleSeries(name) for name in OPERATIONS}
        for index in range(1, runs + 1):
            result = self.run_once(index)
            for name in OPERATIONS:
                series[name].append(result[name])
            self.progress(TrialProgress(run_index=index, runs_total=runs, result=result))
        return series

    def summarize(self, series: SampleSeries) -> AggregateStats:
        """Reduce one operation's series to integer statistics."""
        return summarize(series)

    def run(self) -> TrialReport:
        """Execute the full trial and summarize every operation.

        Raises:
            InvalidConfiguration: If the configuration is invalid.
        """
        runs = self._resolve_runs(None)

        report = TrialReport(
            config=self.config,
            system=capture_system_profile(self.config.clock),
            start_time=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        )
        log.info(
            "Running %s: %d runs x %d collections x %d elements, %d lookup passes",
            self.collection.name or type(self.collection).__name__,
            runs,
            self.config.population_size,
            self.config.elements_per_collection,
            self.config.lookup_iterations,
        )
        log.debug("%d timed operations per run", self.config.measurements_per_run)

        report.series = self._collect(runs)
        report.stats = {name: self.summarize(s) for name, s in report.series.items()}
        report.end_time = time.strftime("%Y-%m-%dT%H:%M:%S%z")
        return report

    def _default_progress(self, progress: TrialProgress) -> None:
        """Default progress callback: log the run's measured total.

        The per-operation totals follow at DEBUG level.
        """
        log.info(
            "  [%d/%d] %15d ns measured",
            progress.run_index,
            progress.runs_total,
            progress.elapsed_ns,
        )
        if log.isEnabledFor(logging.DEBUG):
            log.debug("%s", format_run_totals(self.config, progress.result))
