"""Shared test fixtures for benchmark tests."""

from __future__ import annotations

from typing import Any

from hashbench.bench.adapters import SetAdapter
from hashbench.bench.config import TrialConfig


class StepClock:
    """Fake monotonic clock that advances by *step* on every read.

    Every :func:`measure` call therefore reports exactly *step* ns.
    """

    def __init__(self, step: int = 1, start: int = 1_000) -> None:
        self.step = step
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        value = self.now
        self.now += self.step
        return value


class RecordingAdapter(SetAdapter):
    """Set adapter that records every operation applied to it."""

    name = "recording"

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.lookups: list[tuple[int, bool]] = []

    def create(self) -> set[int]:
        self.calls.append(("create", None))
        return super().create()

    def insert(self, collection: set[int], value: int) -> None:
        self.calls.append(("insert", value))
        super().insert(collection, value)

    def delete(self, collection: set[int], value: int) -> None:
        self.calls.append(("delete", value))
        super().delete(collection, value)

    def contains(self, collection: set[int], value: int) -> bool:
        found = super().contains(collection, value)
        self.calls.append(("contains", value))
        self.lookups.append((value, found))
        return found

    def size(self, collection: set[int]) -> int:
        self.calls.append(("size", None))
        return super().size(collection)

    def traverse(self, collection: set[int]) -> int:
        visited = super().traverse(collection)
        self.calls.append(("traverse", visited))
        return visited

    def values_for(self, op: str) -> list[Any]:
        return [value for name, value in self.calls if name == op]


class FailingAdapter(SetAdapter):
    """Set adapter whose membership test always raises."""

    name = "failing"

    def contains(self, collection: set[int], value: int) -> bool:
        raise RuntimeError("lookup exploded")


def make_config(
    *,
    repeat_count: int = 2,
    population_size: int = 2,
    elements_per_collection: int = 2,
    lookup_iterations: int = 1,
    **kwargs: Any,
) -> TrialConfig:
    """Create a small TrialConfig suitable for unit tests."""
    return TrialConfig(
        repeat_count=repeat_count,
        population_size=population_size,
        elements_per_collection=elements_per_collection,
        lookup_iterations=lookup_iterations,
        **kwargs,
    )
