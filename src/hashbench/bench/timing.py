"""Timing capture for individual collection operations.

A clock is any zero-argument callable returning a monotonic timestamp
in integer nanoseconds.  :func:`measure` reads it immediately before
and after running an operation and returns the difference; nothing else
happens between the two reads.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable

Clock = Callable[[], int]

# Named monotonic clocks.  Wall-clock sources (time.time_ns) are
# deliberately absent.
CLOCKS: dict[str, Clock] = {
    "perf_counter": time.perf_counter_ns,
    "monotonic": time.monotonic_ns,
}

DEFAULT_CLOCK = "perf_counter"


def get_clock(name: str) -> Clock:
    """Return the clock registered under *name*.

    Raises:
        ValueError: If *name* is not a known clock.
    """
    try:
        return CLOCKS[name]
    except KeyError:
        raise ValueError(
            f"Unknown clock '{name}'. Available: {', '.join(sorted(CLOCKS))}"
        ) from None


def measure(operation: Callable[[], Any], clock: Clock = time.perf_counter_ns) -> int:
    """Time a single invocation of *operation* in nanoseconds.

    The operation is called exactly once.  If it raises, the exception
    propagates and no sample is produced.  A result of 0 is valid when
    the clock cannot tell the two instants apart.
    """
    start = clock()
    operation()
    end = clock()
    return end - start


# ---------------------------------------------------------------------------
# Clock characterisation
# ---------------------------------------------------------------------------


@dataclass
class ClockInfo:
    """Properties of a named clock, as reported by the platform."""

    name: str
    implementation: str
    resolution_ns: float
    monotonic: bool
    adjustable: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)


def clock_info(name: str = DEFAULT_CLOCK) -> ClockInfo:
    """Describe the clock registered under *name*.

    Raises:
        ValueError: If *name* is not a known clock.
    """
    get_clock(name)
    info = time.get_clock_info(name)
    return ClockInfo(
        name=name,
        implementation=info.implementation,
        resolution_ns=info.resolution * 1_000_000_000,
        monotonic=info.monotonic,
        adjustable=info.adjustable,
    )
