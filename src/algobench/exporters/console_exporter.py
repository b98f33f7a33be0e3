# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from algobench.common.formatting import format_bytes, format_duration
from algobench.engine.models import BenchmarkResult


class ConsoleExporter:
    """Prints benchmark results to the console as a rich table."""

    def __init__(self, results: Sequence[BenchmarkResult]) -> None:
        self._results = results

    def build_table(self) -> Table:
        table = Table(title="BENCHMARK RESULTS", title_style="bold")
        table.add_column("Algorithm", style="cyan", no_wrap=True)
        table.add_column("Array Type")
        table.add_column("Size", justify="right")
        table.add_column("Runs", justify="right")
        table.add_column("Mean", justify="right", style="green")
        table.add_column("Std Dev", justify="right")
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Memory", justify="right")
        for r in self._results:
            table.add_row(
                r.algorithm,
                r.array_type,
                str(r.size),
                str(r.runs),
                format_duration(r.mean_duration_ns),
                format_duration(r.std_deviation_ns),
                format_duration(r.min_duration_ns),
                format_duration(r.max_duration_ns),
                format_bytes(r.memory_used_bytes),
            )
        return table

    def export(self, console: Console) -> None:
        if not self._results:
            console.print("No results to display.")
            return
        console.print(self.build_table())
