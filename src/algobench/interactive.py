# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Menu driven console for running benchmarks and exporting results."""

import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from algobench.cli_runner import print_results
from algobench.common.enums import AlgorithmKind, Distribution
from algobench.common.environment import Environment
from algobench.common.exceptions import AlgoBenchError
from algobench.data.generator import get_all_distributions
from algobench.engine.models import BenchmarkConfig
from algobench.engine.runner import BenchmarkRunner
from algobench.exporters import CsvExporter, ExporterConfig, MarkdownExporter

logger = logging.getLogger(__name__)

__all__ = ["InteractiveConsole"]

_MENU = (
    "Run single algorithm benchmark",
    "Run all search algorithms",
    "Run all sort algorithms",
    "Run comprehensive benchmark",
    "Export results",
    "Exit",
)

_EXPORT_MENU = ("Export to CSV", "Export to Markdown", "Export to both")


class InteractiveConsole:
    """Interactive menu loop over a BenchmarkRunner.

    Every benchmark action clears the previous results first. Failures are
    reported and the menu is shown again.
    """

    def __init__(
        self,
        runner: BenchmarkRunner | None = None,
        console: Console | None = None,
        output_dir: Path | None = None,
    ) -> None:
        self.runner = runner if runner is not None else BenchmarkRunner()
        self.console = console if console is not None else Console()
        self.output_dir = output_dir if output_dir is not None else Path.cwd()
        self._actions = {
            1: self.single_benchmark,
            2: self.search_benchmarks,
            3: self.sort_benchmarks,
            4: self.comprehensive_benchmark,
            5: self.export,
        }

    def run(self) -> None:
        self.console.print("[bold]Algorithm Benchmark Tool - Interactive Mode[/bold]")
        while True:
            self.console.print("\nAvailable options:")
            self._print_options(_MENU)
            choice = IntPrompt.ask(
                f"Enter your choice (1-{len(_MENU)})", console=self.console
            )
            if choice == len(_MENU):
                self.console.print("Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self.console.print("Invalid choice. Please try again.")
                continue
            try:
                action()
            except (AlgoBenchError, ValidationError) as e:
                logger.error(f"Error: {e}")
                self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    def single_benchmark(self) -> None:
        names = self.runner.registry.names()
        self.console.print("\nAvailable algorithms:")
        self._print_options(names)
        choice = IntPrompt.ask(f"Select algorithm (1-{len(names)})", console=self.console)
        if not 1 <= choice <= len(names):
            self.console.print("Invalid choice.")
            return
        algorithm = names[choice - 1]

        distributions = get_all_distributions()
        self.console.print("\nArray types:")
        self._print_options([d.display_name for d in distributions])
        choice = IntPrompt.ask(
            f"Select array type (1-{len(distributions)})", console=self.console
        )
        if not 1 <= choice <= len(distributions):
            self.console.print("Invalid choice.")
            return
        distribution: Distribution = distributions[choice - 1]

        size = IntPrompt.ask(
            "Enter array size",
            default=Environment.BENCHMARK.DEFAULT_SIZE,
            console=self.console,
        )
        runs = self._ask_runs()

        config = BenchmarkConfig(
            algorithm=algorithm,
            distribution=distribution,
            size=size,
            runs=runs,
            target=size // 2,
        )
        self.runner.clear_results()
        self.console.print(
            f"Running benchmark for {algorithm} with {distribution.display_name} "
            f"array of size {size} ({runs} runs)..."
        )
        self.runner.run_one(config)
        self._show_results()

    def search_benchmarks(self) -> None:
        self._run_sweep(AlgorithmKind.SEARCH)

    def sort_benchmarks(self) -> None:
        self._run_sweep(AlgorithmKind.SORT)

    def comprehensive_benchmark(self) -> None:
        self._run_sweep(None)

    def _run_sweep(self, kind: AlgorithmKind | None) -> None:
        runs = self._ask_runs()
        sizes = list(Environment.BENCHMARK.SWEEP_SIZES)
        self.runner.clear_results()
        try:
            if kind is AlgorithmKind.SEARCH:
                self.console.print("Running search benchmarks...")
                self.runner.run_search_sweep(sizes, runs)
            elif kind is AlgorithmKind.SORT:
                self.console.print("Running sort benchmarks...")
                self.runner.run_sort_sweep(sizes, runs)
            else:
                self.console.print("Running all benchmarks...")
                self.runner.run_all(sizes, runs)
        finally:
            # Results stored before a failure are kept, so show them too.
            self._show_results()

    def export(self) -> None:
        results = self.runner.get_results()
        if not results:
            self.console.print("No results to export.")
            return

        self.console.print("\nExport options:")
        self._print_options(_EXPORT_MENU)
        choice = IntPrompt.ask(
            f"Select export format (1-{len(_EXPORT_MENU)})", console=self.console
        )
        exporters = {
            1: (CsvExporter,),
            2: (MarkdownExporter,),
            3: (CsvExporter, MarkdownExporter),
        }.get(choice)
        if exporters is None:
            self.console.print("Invalid choice.")
            return

        # One timestamp so "both" produces matching file names.
        config = ExporterConfig(
            results=results, output_dir=self.output_dir, generated_at=datetime.now()
        )
        for exporter_cls in exporters:
            try:
                path = exporter_cls(config).export()
            except AlgoBenchError as e:
                self.console.print(
                    f"[red]Error exporting {exporter_cls.file_extension}:[/red] "
                    f"{escape(str(e))}"
                )
            else:
                self.console.print(f"Results exported to {path}")

    def _ask_runs(self) -> int:
        return IntPrompt.ask(
            "Enter number of runs",
            default=Environment.BENCHMARK.DEFAULT_RUNS,
            console=self.console,
        )

    def _show_results(self) -> None:
        print_results(self.runner.get_results(), self.console)

    def _print_options(self, options) -> None:
        for i, option in enumerate(options, start=1):
            self.console.print(f"{i}. {option}")
