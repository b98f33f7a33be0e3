# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for AlgoBench.

Examples:
    algobench run quick_sort --size 10000 --runs 10
    algobench run all --array-type random --export-csv results.csv
    algobench interactive
    algobench serve --port 8080
"""

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Group, Parameter
from rich.console import Console

from algobench import __version__
from algobench.common.enums import Distribution
from algobench.common.environment import Environment
from algobench.common.logging import setup_rich_logging

app = App(
    name="algobench",
    help="Benchmark search and sort algorithms.",
    version=__version__,
)

_BENCHMARK_GROUP = Group("Benchmark")
_EXPORT_GROUP = Group("Export")


@app.command
def run(
    algorithm: Annotated[
        str,
        Parameter(
            name=("--algorithm", "-a"),
            group=_BENCHMARK_GROUP,
            help="Algorithm to benchmark, or 'all' for the search and sort sweeps. "
            "See `algobench list`.",
        ),
    ],
    array_type: Annotated[
        str,
        Parameter(
            name=("--array-type", "-t"),
            group=_BENCHMARK_GROUP,
            help="Input distribution: random, sorted or reverse.",
        ),
    ] = Distribution.RANDOM.value,
    size: Annotated[
        int,
        Parameter(
            name=("--size", "-n"), group=_BENCHMARK_GROUP, help="Array size."
        ),
    ] = Environment.BENCHMARK.DEFAULT_SIZE,
    runs: Annotated[
        int,
        Parameter(
            name=("--runs", "-r"),
            group=_BENCHMARK_GROUP,
            help="Number of trials per benchmark.",
        ),
    ] = Environment.BENCHMARK.DEFAULT_RUNS,
    seed: Annotated[
        int | None,
        Parameter(
            name=("--seed",),
            group=_BENCHMARK_GROUP,
            help="Seed for input generation, for reproducible inputs.",
        ),
    ] = None,
    export_csv: Annotated[
        Path | None,
        Parameter(name=("--export-csv",), group=_EXPORT_GROUP),
    ] = None,
    export_md: Annotated[
        Path | None,
        Parameter(name=("--export-md",), group=_EXPORT_GROUP),
    ] = None,
    export_json: Annotated[
        Path | None,
        Parameter(name=("--export-json",), group=_EXPORT_GROUP),
    ] = None,
    log_level: Annotated[str | None, Parameter(name=("--log-level",))] = None,
) -> None:
    """Run one benchmark, or every benchmark with 'all', then print and export the results."""
    from algobench.cli_runner import export_results, print_results, run_benchmark_command
    from algobench.data.generator import make_rng
    from algobench.engine.runner import BenchmarkRunner

    logger = setup_rich_logging(log_level)

    try:
        distribution = Distribution.parse(array_type)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    runner = BenchmarkRunner(rng=make_rng(seed))
    ok = run_benchmark_command(runner, algorithm, distribution, size, runs)

    results = runner.get_results()
    print_results(results, Console())
    export_results(results, csv_path=export_csv, md_path=export_md, json_path=export_json)

    if not ok:
        sys.exit(1)


@app.command(name="list")
def list_algorithms() -> None:
    """List the available algorithms."""
    from algobench.algorithms.registry import default_registry
    from algobench.cli_runner import print_algorithms

    print_algorithms(default_registry(), Console())


@app.command
def interactive(
    seed: Annotated[int | None, Parameter(name=("--seed",))] = None,
    log_level: Annotated[str | None, Parameter(name=("--log-level",))] = None,
) -> None:
    """Start the interactive menu."""
    from algobench.data.generator import make_rng
    from algobench.engine.runner import BenchmarkRunner
    from algobench.interactive import InteractiveConsole

    setup_rich_logging(log_level)
    InteractiveConsole(BenchmarkRunner(rng=make_rng(seed))).run()


@app.command
def serve(
    host: Annotated[str | None, Parameter(name=("--host",))] = None,
    port: Annotated[int | None, Parameter(name=("--port", "-p"))] = None,
    log_level: Annotated[str | None, Parameter(name=("--log-level",))] = None,
) -> None:
    """Serve the JSON web API. Host and port default to ALGOBENCH_WEB_HOST and ALGOBENCH_WEB_PORT."""
    from algobench.web.server import run_server

    setup_rich_logging(log_level)
    run_server(host=host, port=port)


if __name__ == "__main__":
    sys.exit(app())
