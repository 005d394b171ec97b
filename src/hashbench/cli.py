"""Command-line interface for hashbench.

Subcommands:
    hashbench run          Run a timed trial and print its statistics
    hashbench system       Print host and clock characterization
    hashbench collections  List the collection types that can be measured
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from hashbench import __version__
from hashbench.bench.adapters import COLLECTIONS, available_collections
from hashbench.bench.timing import CLOCKS, DEFAULT_CLOCK
from hashbench.logging import setup_logging


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """hashbench — micro-benchmarks for hash-based collection types."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, path_type=Path),
    help="YAML profile with trial settings.",
)
@click.option(
    "--collection",
    type=click.Choice(available_collections()),
    default=None,
    help="Collection type to measure (default: set).",
)
@click.option(
    "--runs",
    "repeat_count",
    type=int,
    default=None,
    help="Number of full runs (default: 5).",
)
@click.option(
    "--population",
    "population_size",
    type=int,
    default=None,
    help="Collections built per run (default: 10000).",
)
@click.option(
    "--elements",
    "elements_per_collection",
    type=int,
    default=None,
    help="Elements inserted into each collection (default: 1000).",
)
@click.option(
    "--lookups",
    "lookup_iterations",
    type=int,
    default=None,
    help="Lookup passes over the population (default: 10).",
)
@click.option(
    "--clock",
    type=click.Choice(sorted(CLOCKS)),
    default=None,
    help=f"Monotonic clock used for timing (default: {DEFAULT_CLOCK}).",
)
@click.option("--name", type=str, default=None, help="Human-readable trial name.")
@click.option(
    "--quick",
    is_flag=True,
    default=False,
    help="Quick mode: at most 3 runs of 1000 x 100 elements, 2 lookup passes.",
)
@click.option("--per-run", is_flag=True, default=False, help="Print totals after every run.")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Also write a DEBUG log to this file.",
)
def run(  # noqa: PLR0913
    profile_path: Path | None,
    collection: str | None,
    repeat_count: int | None,
    population_size: int | None,
    elements_per_collection: int | None,
    lookup_iterations: int | None,
    clock: str | None,
    name: str | None,
    quick: bool,
    per_run: bool,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Run a timed trial and print per-operation statistics.

    \b
    Examples:
        # Defaults: 5 runs over 10000 sets of 1000 elements
        hashbench run

        # Smaller dict trial with per-run totals
        hashbench run --collection dict --runs 3 --population 1000 --per-run

        # Settings from a YAML profile, overriding the run count
        hashbench run --profile trial.yaml --runs 10
    """
    from hashbench.bench.config import (
        InvalidConfiguration,
        config_from_profile,
        load_profile,
        quick_config,
    )
    from hashbench.bench.display import format_report, format_run_totals
    from hashbench.bench.runner import TrialProgress, TrialRunner

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    cli_overrides: dict[str, object] = {
        "name": name,
        "collection": collection,
        "clock": clock,
        "repeat_count": repeat_count,
        "population_size": population_size,
        "elements_per_collection": elements_per_collection,
        "lookup_iterations": lookup_iterations,
    }

    try:
        profile_data = load_profile(profile_path) if profile_path else {}
        config = config_from_profile(profile_data, cli_overrides=cli_overrides)
        if quick:
            config = quick_config(config)
    except (FileNotFoundError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    progress_callback = None
    if per_run and not as_json:

        def _print_run(p: TrialProgress) -> None:
            click.echo(f"Run {p.run_index}/{p.runs_total}")
            click.echo(format_run_totals(config, p.result))
            click.echo()

        progress_callback = _print_run

    runner = TrialRunner(config, progress_callback=progress_callback)
    try:
        report = runner.run()
    except InvalidConfiguration as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        click.echo("\nBenchmark interrupted.", err=True)
        raise SystemExit(130)  # noqa: B904

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        click.echo(format_report(report))


# ---------------------------------------------------------------------------
# system
# ---------------------------------------------------------------------------


@main.command("system")
@click.option(
    "--clock",
    type=click.Choice(sorted(CLOCKS)),
    default=DEFAULT_CLOCK,
    show_default=True,
    help="Clock to describe.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def system_cmd(clock: str, as_json: bool) -> None:
    """Print host and clock characterization for benchmark reports."""
    from hashbench.bench.system import capture_system_profile, format_system_profile

    profile = capture_system_profile(clock)
    if as_json:
        click.echo(profile.to_json())
    else:
        click.echo(format_system_profile(profile))


# ---------------------------------------------------------------------------
# collections
# ---------------------------------------------------------------------------


@main.command("collections")
def collections_cmd() -> None:
    """List the collection types that can be measured."""
    for name in available_collections():
        click.echo(f"{name:<8s} {COLLECTIONS[name].description}")
