"""Trial configuration and profile loading.

Handles:
- The resolved :class:`TrialConfig` for a benchmark run.
- Validating it before any measurement starts.
- Loading profiles from YAML files and merging CLI overrides on top.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from hashbench.bench.adapters import COLLECTIONS
from hashbench.bench.timing import CLOCKS, DEFAULT_CLOCK
from hashbench.logging import get_logger

log = get_logger("bench.config")


class InvalidConfiguration(ValueError):
    """Raised when a trial is configured with values it cannot run with."""


# ---------------------------------------------------------------------------
# TrialConfig
# ---------------------------------------------------------------------------


@dataclass
class TrialConfig:
    """Resolved configuration for a benchmark trial."""

    name: str = ""

    # Iteration control
    repeat_count: int = 5  # Number of full runs
    population_size: int = 10_000  # Collections built per run
    elements_per_collection: int = 1_000
    lookup_iterations: int = 10  # Passes over the population per lookup benchmark

    # What is measured, and with which clock
    collection: str = "set"
    clock: str = DEFAULT_CLOCK

    @property
    def title(self) -> str:
        """Human-readable title for reports."""
        return self.name or f"{self.collection} benchmark"

    @property
    def measurements_per_run(self) -> int:
        """Individual timed operations in one run, across all sub-benchmarks."""
        # create, size, iterate, delete, add: one each per collection.
        return self.population_size * (5 + 2 * self.lookup_iterations)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation error."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


_POSITIVE_FIELDS = (
    "repeat_count",
    "population_size",
    "elements_per_collection",
    "lookup_iterations",
)


def validate_config(config: TrialConfig) -> list[ValidationError]:
    """Validate a trial configuration.

    Returns a list of validation errors.  Empty list means valid.
    """
    errors: list[ValidationError] = []

    for name in _POSITIVE_FIELDS:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(
                ValidationError(
                    field=name,
                    message=f"Must be an integer (got {value!r}).",
                )
            )
        elif value < 1:
            errors.append(
                ValidationError(
                    field=name,
                    message=f"Must be at least 1 (got {value}).",
                )
            )

    if config.collection not in COLLECTIONS:
        errors.append(
            ValidationError(
                field="collection",
                message=(
                    f"Unknown collection '{config.collection}'. "
                    f"Available: {', '.join(sorted(COLLECTIONS))}"
                ),
            )
        )

    if config.clock not in CLOCKS:
        errors.append(
            ValidationError(
                field="clock",
                message=(
                    f"Unknown clock '{config.clock}'. Available: {', '.join(sorted(CLOCKS))}"
                ),
            )
        )

    # A single run is valid but reports a standard deviation of zero.
    if not errors and config.repeat_count == 1:
        errors.append(
            ValidationError(
                field="repeat_count",
                message="Only one run requested; standard deviation will be 0.",
                severity="warning",
            )
        )

    return errors


def check_config(config: TrialConfig) -> None:
    """Validate *config*, logging warnings and raising on errors.

    Raises:
        InvalidConfiguration: If any validation error is fatal.
    """
    errors = validate_config(config)
    fatal = [e for e in errors if e.severity == "error"]
    warnings = [e for e in errors if e.severity == "warning"]
    for w in warnings:
        log.warning("Config warning: %s: %s", w.field, w.message)
    if fatal:
        raise InvalidConfiguration(_describe_errors(fatal))


def _describe_errors(errors: list[ValidationError]) -> str:
    messages = [f"  {e.field}: {e.message}" for e in errors]
    return "Invalid trial configuration:\n" + "\n".join(messages)


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a trial profile from a YAML file.

    Profile format::

        name: "set, large population"
        collection: set
        clock: perf_counter
        repeat_count: 10
        population_size: 10000
        elements_per_collection: 1000
        lookup_iterations: 10

    Returns:
        The parsed YAML as a dict.

    Raises:
        FileNotFoundError: If *profile_path* does not exist.
        ValueError: If the file is not valid YAML or not a mapping.
    """
    import yaml

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    try:
        data = yaml.safe_load(profile_path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in profile {profile_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    return data


_PROFILE_KEYS = (
    "name",
    "collection",
    "clock",
    "repeat_count",
    "population_size",
    "elements_per_collection",
    "lookup_iterations",
)


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> TrialConfig:
    """Build a TrialConfig from a parsed YAML profile.

    CLI overrides that are not ``None`` take precedence over profile
    values.  Keys match TrialConfig field names.

    Raises:
        ValueError: If the profile contains keys TrialConfig does not know.
    """
    unknown = sorted(set(profile_data) - set(_PROFILE_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown profile key(s): {', '.join(unknown)}. "
            f"Valid keys: {', '.join(_PROFILE_KEYS)}"
        )

    values = {key: profile_data[key] for key in _PROFILE_KEYS if key in profile_data}
    for key, value in (cli_overrides or {}).items():
        if key in _PROFILE_KEYS and value is not None:
            values[key] = value

    return TrialConfig(**values)


# ---------------------------------------------------------------------------
# Quick mode helper
# ---------------------------------------------------------------------------


def quick_config(config: TrialConfig) -> TrialConfig:
    """Apply quick mode settings for smoke runs.

    Caps the run count at 3, the population at 1000 collections of 100
    elements, and the lookup passes at 2.

    Raises:
        InvalidConfiguration: If a count is not a positive integer, since
            it cannot be capped.
    """
    fatal = [e for e in validate_config(config) if e.severity == "error"]
    if fatal:
        raise InvalidConfiguration(_describe_errors(fatal))
    config.repeat_count = min(config.repeat_count, 3)
    config.population_size = min(config.population_size, 1_000)
    config.elements_per_collection = min(config.elements_per_collection, 100)
    config.lookup_iterations = min(config.lookup_iterations, 2)
    config.name = f"{config.name} (quick)" if config.name else "Quick benchmark"
    return config
