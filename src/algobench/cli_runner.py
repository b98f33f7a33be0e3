# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from algobench.algorithms.registry import AlgorithmRegistry
from algobench.common.constants import ALL_ALGORITHMS
from algobench.common.enums import Distribution
from algobench.common.environment import Environment
from algobench.common.exceptions import AlgoBenchError
from algobench.engine.models import BenchmarkConfig, BenchmarkResult
from algobench.engine.runner import BenchmarkRunner
from algobench.exporters import (
    BaseExporter,
    ConsoleExporter,
    CsvExporter,
    ExporterConfig,
    JsonExporter,
    MarkdownExporter,
)

logger = logging.getLogger(__name__)


def run_benchmark_command(
    runner: BenchmarkRunner,
    algorithm: str,
    distribution: Distribution,
    size: int,
    runs: int,
    sweep_sizes: Sequence[int] | None = None,
) -> bool:
    """Clear previous results, then run one benchmark or the full sweep.

    When ``algorithm`` is ``all`` the search sweep and the sort sweep run over
    ``sweep_sizes`` (defaults to ALGOBENCH_BENCHMARK_SWEEP_SIZES) and ``size``
    and ``distribution`` are ignored. Otherwise a single benchmark runs with
    target ``size // 2``.

    Errors are logged, not raised. Results stored before a failure are kept.

    Returns:
        True if everything ran, False if a benchmark failed
    """
    runner.clear_results()

    if algorithm == ALL_ALGORITHMS:
        sizes = list(sweep_sizes or Environment.BENCHMARK.SWEEP_SIZES)
        logger.info(f"Running all benchmarks over sizes {sizes} ({runs} runs each)")
        try:
            logger.info("Running search benchmarks...")
            runner.run_search_sweep(sizes, runs)
            logger.info("Running sort benchmarks...")
            runner.run_sort_sweep(sizes, runs)
        except AlgoBenchError as e:
            logger.error(f"Error running benchmarks: {e}")
            return False
        return True

    logger.info(
        f"Running benchmark for {algorithm} with {distribution.display_name} "
        f"array of size {size} ({runs} runs)..."
    )
    try:
        config = BenchmarkConfig(
            algorithm=algorithm,
            distribution=distribution,
            size=size,
            runs=runs,
            target=size // 2,
        )
        runner.run_one(config)
    except (AlgoBenchError, ValueError) as e:
        logger.error(f"Error running benchmark: {e}")
        return False
    logger.info("Benchmark completed successfully!")
    return True


def print_results(results: Sequence[BenchmarkResult], console: Console) -> None:
    ConsoleExporter(results).export(console)


def print_algorithms(registry: AlgorithmRegistry, console: Console) -> None:
    """Print every registered algorithm with its kind."""
    table = Table(title="Available algorithms")
    table.add_column("#", justify="right")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Kind")
    for i, spec in enumerate(registry, start=1):
        table.add_row(str(i), spec.name, str(spec.kind))
    console.print(table)


def export_results(
    results: Sequence[BenchmarkResult],
    csv_path: Path | None = None,
    md_path: Path | None = None,
    json_path: Path | None = None,
) -> list[Path]:
    """Write each requested export. A failing format does not stop the others.

    Returns:
        Paths that were written
    """
    requested: list[tuple[type[BaseExporter], Path]] = [
        (exporter_cls, path)
        for exporter_cls, path in (
            (CsvExporter, csv_path),
            (MarkdownExporter, md_path),
            (JsonExporter, json_path),
        )
        if path is not None
    ]
    if not requested:
        return []
    if not results:
        logger.warning("No results to export.")
        return []

    config = ExporterConfig(results=results)
    written = []
    for exporter_cls, path in requested:
        try:
            written.append(exporter_cls(config).export(path))
        except AlgoBenchError as e:
            logger.error(f"Error exporting to {exporter_cls.file_extension}: {e}")
    return written
