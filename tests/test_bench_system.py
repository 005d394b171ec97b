"""Tests for hashbench.bench.system — host and clock characterisation."""

from __future__ import annotations

import json
import platform
import unittest
from unittest.mock import patch

from hashbench.bench.system import (
    SystemProfile,
    capture_system_profile,
    format_system_profile,
)
from hashbench.bench.timing import ClockInfo


class TestCaptureSystemProfile(unittest.TestCase):
    """Tests for capture_system_profile."""

    def test_capture_system_profile_returns_profile(self) -> None:
        profile = capture_system_profile()
        self.assertIsInstance(profile, SystemProfile)
        self.assertEqual(profile.python_version, platform.python_version())
        self.assertTrue(profile.python_implementation)
        self.assertGreater(profile.cpu_count, 0)
        self.assertTrue(profile.timestamp)

    def test_clock_captured(self) -> None:
        profile = capture_system_profile("monotonic")
        self.assertIsNotNone(profile.clock)
        assert profile.clock is not None
        self.assertEqual(profile.clock.name, "monotonic")

    def test_unknown_clock(self) -> None:
        with self.assertRaises(ValueError):
            capture_system_profile("time")

    def test_hash_seed_recorded(self) -> None:
        with patch.dict("os.environ", {"PYTHONHASHSEED": "0"}):
            profile = capture_system_profile()
        self.assertEqual(profile.extra["PYTHONHASHSEED"], "0")

    def test_to_json_round_trips_fields(self) -> None:
        data = json.loads(capture_system_profile().to_json())
        self.assertIn("python_version", data)
        self.assertEqual(data["clock"]["name"], "perf_counter")


class TestFormatSystemProfile(unittest.TestCase):
    """Tests for format_system_profile."""

    def _profile(self, **kwargs: object) -> SystemProfile:
        base = dict(
            python_version="3.13.1",
            python_implementation="CPython",
            python_compiler="GCC 13.2.0",
            cpu_architecture="x86_64",
            cpu_count=8,
            os_name="Linux",
            os_release="6.8.0",
            clock=ClockInfo(
                name="perf_counter",
                implementation="clock_gettime(CLOCK_MONOTONIC)",
                resolution_ns=1.0,
                monotonic=True,
                adjustable=False,
            ),
        )
        base.update(kwargs)
        return SystemProfile(**base)  # type: ignore[arg-type]

    def test_format_lines(self) -> None:
        text = format_system_profile(self._profile())
        self.assertIn("System Profile", text)
        self.assertIn("CPython 3.13.1 (GCC 13.2.0)", text)
        self.assertIn("Linux 6.8.0", text)
        self.assertIn("x86_64, 8 logical cores", text)
        self.assertIn("perf_counter", text)
        self.assertIn("resolution 1 ns", text)
        self.assertNotIn("NOT monotonic", text)

    def test_gil_disabled_shown(self) -> None:
        text = format_system_profile(self._profile(gil_disabled=True))
        self.assertIn("GIL disabled", text)

    def test_without_clock(self) -> None:
        text = format_system_profile(self._profile(clock=None))
        self.assertNotIn("Clock:", text)

    def test_extra_shown(self) -> None:
        text = format_system_profile(self._profile(extra={"PYTHONHASHSEED": "0"}))
        self.assertIn("PYTHONHASHSEED:", text)


if __name__ == "__main__":
    unittest.main()
