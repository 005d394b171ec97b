"""Integer statistics over nanosecond timing samples.

Every reduction here (sum, average, variance, square root) is defined
over Python integers only.  Timing deltas are exact integers, and keeping
the arithmetic exact makes the reported numbers reproducible bit-for-bit
no matter how many samples are accumulated or where the report is
produced.

The standard deviation is the *population* standard deviation (no
Bessel correction), truncated toward zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence


class EmptySeries(ValueError):
    """Raised when statistics are requested over zero samples."""


# ---------------------------------------------------------------------------
# SampleSeries
# ---------------------------------------------------------------------------


class SampleSeries:
    """Append-only, ordered samples (integer nanoseconds) for one operation.

    Insertion order is the chronological order of measurement.  Samples
    are never modified once appended.
    """

    def __init__(self, name: str, samples: Iterable[int] = ()) -> None:
        self.name = name
        self._samples: list[int] = []
        for sample in samples:
            self.append(sample)

    def append(self, sample: int) -> None:
        """Append one sample.

        Raises:
            ValueError: If *sample* is not a non-negative integer.
        """
        if isinstance(sample, bool) or not isinstance(sample, int):
            raise ValueError(
                f"Sample for '{self.name}' must be an integer nanosecond count, "
                f"got {type(sample).__name__}"
            )
        if sample < 0:
            raise ValueError(f"Sample for '{self.name}' must be non-negative (got {sample})")
        self._samples.append(sample)

    @property
    def samples(self) -> tuple[int, ...]:
        """Read-only view of the samples in measurement order."""
        return tuple(self._samples)

    @property
    def total(self) -> int:
        """Exact integer sum of all samples."""
        return sum(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[int]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"SampleSeries({self.name!r}, n={len(self._samples)})"


# ---------------------------------------------------------------------------
# AggregateStats
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AggregateStats:
    """Summary statistics for a sample series, all in integer nanoseconds."""

    count: int
    average: int
    minimum: int
    maximum: int
    standard_deviation: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "count": self.count,
            "average": self.average,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "standard_deviation": self.standard_deviation,
        }


# ---------------------------------------------------------------------------
# Integer reductions
# ---------------------------------------------------------------------------


def integer_sqrt(n: int) -> int:
    """Integer square root by Newton's method, truncated toward zero.

    Starts from ``x = n`` and iterates ``y = (x + n // x) // 2`` until
    ``y >= x``; the last ``x`` is the result.  Other integer square root
    algorithms can disagree by one near perfect squares, so the iteration
    is kept exactly as written.

    Raises:
        ValueError: If *n* is negative.
    """
    if n < 0:
        raise ValueError(f"Cannot take the square root of a negative number ({n})")
    if n == 0:
        return 0

    x = n
    y = (x + n // x) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def integer_average(samples: Sequence[int]) -> int:
    """Floor of the mean of *samples*.

    Raises:
        EmptySeries: If *samples* is empty.
    """
    if not samples:
        raise EmptySeries("Cannot average an empty sample series")
    return sum(samples) // len(samples)


def population_variance(samples: Sequence[int], average: int | None = None) -> int:
    """Integer population variance around the integer average.

    Raises:
        EmptySeries: If *samples* is empty.
    """
    if not samples:
        raise EmptySeries("Cannot compute the variance of an empty sample series")
    if average is None:
        average = integer_average(samples)
    squared = sum((s - average) * (s - average) for s in samples)
    return squared // len(samples)


def standard_deviation(samples: Sequence[int]) -> int:
    """Integer population standard deviation of *samples*.

    Raises:
        EmptySeries: If *samples* is empty.
    """
    return integer_sqrt(population_variance(samples))


def summarize(series: SampleSeries | Sequence[int]) -> AggregateStats:
    """Reduce a sample series to its average, extrema and standard deviation.

    Accepts a :class:`SampleSeries` or any sequence of integer samples.
    The function is pure: the same samples always give the same result.

    Raises:
        EmptySeries: If the series holds no samples.
    """
    values = series.samples if isinstance(series, SampleSeries) else tuple(series)
    if not values:
        name = series.name if isinstance(series, SampleSeries) else "<samples>"
        raise EmptySeries(f"No samples recorded for '{name}'")

    average = integer_average(values)

    minimum = values[0]
    maximum = values[0]
    for value in values[1:]:
        if value < minimum:
            minimum = value
        if value > maximum:
            maximum = value

    return AggregateStats(
        count=len(values),
        average=average,
        minimum=minimum,
        maximum=maximum,
        standard_deviation=integer_sqrt(population_variance(values, average)),
    )
