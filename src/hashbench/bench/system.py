"""Host characterisation for benchmark reports.

Captures the interpreter, OS and clock details a nanosecond-level
report needs in order to be read in context.  Everything here comes
from the standard library; nothing is probed by running subprocesses.
"""

from __future__ import annotations

import json
import os
import platform
import socket
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any

from hashbench.bench.timing import DEFAULT_CLOCK, ClockInfo, clock_info


@dataclass
class SystemProfile:
    """Characterisation of the process running a benchmark."""

    # Python
    python_version: str = ""
    python_implementation: str = ""
    python_compiler: str = ""
    gil_disabled: bool = False

    # Hardware / OS
    cpu_architecture: str = ""
    cpu_count: int = 0
    os_name: str = ""
    os_release: str = ""

    # Clock used for measurement
    clock: ClockInfo | None = None

    # Environment
    hostname: str = ""
    timestamp: str = ""
    extra: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def capture_system_profile(clock_name: str = DEFAULT_CLOCK) -> SystemProfile:
    """Capture the current host and clock profile.

    Raises:
        ValueError: If *clock_name* is not a known clock.
    """
    profile = SystemProfile(
        python_version=platform.python_version(),
        python_implementation=platform.python_implementation(),
        python_compiler=platform.python_compiler(),
        gil_disabled=_gil_disabled(),
        cpu_architecture=platform.machine(),
        cpu_count=os.cpu_count() or 0,
        os_name=platform.system(),
        os_release=platform.release(),
        clock=clock_info(clock_name),
        hostname=socket.gethostname(),
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
    )
    hash_seed = os.environ.get("PYTHONHASHSEED")
    if hash_seed is not None:
        profile.extra["PYTHONHASHSEED"] = hash_seed
    return profile


def _gil_disabled() -> bool:
    """True on a free-threaded build running with the GIL off."""
    is_enabled = getattr(sys, "_is_gil_enabled", None)
    if is_enabled is None:
        return False
    return not is_enabled()


def format_system_profile(profile: SystemProfile) -> str:
    """Format a system profile for terminal display."""
    lines = [
        "System Profile",
        "─" * 14,
    ]

    python = f"{profile.python_implementation} {profile.python_version}"
    if profile.python_compiler:
        python += f" ({profile.python_compiler})"
    if profile.gil_disabled:
        python += ", GIL disabled"
    lines.append(f"Python:   {python}")
    lines.append(f"OS:       {profile.os_name} {profile.os_release}")
    lines.append(f"CPU:      {profile.cpu_architecture}, {profile.cpu_count} logical cores")

    if profile.clock is not None:
        clock = profile.clock
        lines.append(
            f"Clock:    {clock.name} ({clock.implementation}), "
            f"resolution {clock.resolution_ns:g} ns"
            + ("" if clock.monotonic else ", NOT monotonic")
        )

    for key, value in sorted(profile.extra.items()):
        lines.append(f"{key + ':':<10s}{value}")

    return "\n".join(lines)
