"""Command line helpers for DustForge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import SimulatorConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.economy_simulator import ComparisonResult, EconomySimulator, SimulationResult
from .loaders import CollectionDefinition, load_collection_from_json, validate_collection_file
from .validators import validate_config

console = Console()


def run_simulator() -> None:
    parser = argparse.ArgumentParser(description="DustForge pack simulator")
    parser.add_argument("collection", help="Path to collection JSON file")
    parser.add_argument("--runs", type=int, default=None, help="Number of Monte Carlo runs")
    parser.add_argument(
        "--multi",
        action="store_true",
        help="Also simulate buying packs across all expansions with shared dust",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    config = SimulatorConfig.from_env()
    if args.runs is not None:
        config.runs = args.runs
    config_errors = validate_config(config)
    if config_errors:
        for err in config_errors:
            console.print(f"[red]- {err}[/red]")
        sys.exit(1)

    definition = _load_or_exit(Path(args.collection))
    simulator = EconomySimulator(config)
    console.print(
        f"Running {config.runs} simulations for {len(definition.states)} expansion(s), "
        f"{definition.dust} dust."
    )

    if args.multi:
        comparison = simulator.compare(definition.states, definition.dust, definition.is_new)
        _print_results(comparison.per_expansion)
        _print_comparison(comparison)
        return

    results = [
        simulator.simulate(state, definition.dust, is_new_expansion=is_new)
        for state, is_new in zip(definition.states, definition.is_new)
    ]
    _print_results(results)


def run_checklist() -> None:
    parser = argparse.ArgumentParser(description="DustForge sanity checks")
    parser.add_argument("collection", help="Path to collection JSON file")
    args = parser.parse_args()

    issues = checklist_run(_load_or_exit(Path(args.collection), strict=False))
    if not issues:
        console.print("No problems found ✅")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="DustForge collection validator")
    parser.add_argument("collection", help="Path to collection JSON file for validation")
    args = parser.parse_args()

    try:
        errors = validate_collection_file(Path(args.collection))
    except ValueError as exc:
        errors = [f"Invalid JSON: {exc}"]
    if errors:
        console.print("Collection errors:")
        for err in errors:
            console.print(f"- {err}", markup=False)
        sys.exit(1)
    console.print("Collection is valid ✅")


def _load_or_exit(path: Path, *, strict: bool = True) -> CollectionDefinition:
    try:
        return load_collection_from_json(path, strict=strict)
    except ValueError as exc:
        console.print(str(exc), style="red", markup=False)
        sys.exit(1)


def _print_results(results: list[SimulationResult] | tuple[SimulationResult, ...]) -> None:
    table = Table(title="Packs needed per expansion")
    table.add_column("Expansion")
    table.add_column("Mean", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Range", justify="right")
    table.add_column("25th-75th", justify="right")
    table.add_column("Dust generated", justify="right")
    table.add_column("Dust crafted", justify="right")

    total_mean = total_min = total_max = 0
    for result in results:
        if result.already_complete:
            table.add_row(result.expansion, "complete", "", "", "", "", "")
            continue
        name = result.expansion
        if result.capped_runs:
            name = f"{name} ({result.capped_runs} runs capped)"
        table.add_row(
            name,
            str(result.mean),
            str(result.median),
            f"{result.min} - {result.max}",
            f"{result.p25} - {result.p75}",
            str(result.avg_dust_generated),
            str(result.avg_dust_spent_crafting),
        )
        total_mean += result.mean
        total_min += result.min
        total_max += result.max

    console.print(table)
    console.print(f"Total packs needed (average): {total_mean}")
    console.print(f"Total range: {total_min} - {total_max}")


def _print_comparison(comparison: ComparisonResult) -> None:
    stats = comparison.multi_pack_stats
    golden = comparison.golden_analysis
    table = Table(title="Shared dust comparison")
    table.add_column("Strategy")
    table.add_column("Packs", justify="right")
    table.add_row("Set by set (sum of means)", str(comparison.per_set_total))
    table.add_row(
        "Random expansion, shared dust",
        f"{stats.mean} (median {stats.median}, {stats.p25} - {stats.p75})",
    )
    table.add_row(
        "Craft everything",
        f"{golden.packs_to_complete} ({golden.total_craft_cost} dust at {golden.avg_dust_per_pack}/pack)",
    )
    console.print(table)
