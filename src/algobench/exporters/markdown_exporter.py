# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Markdown report exporter for benchmark results."""

from algobench.common.formatting import format_bytes, format_duration
from algobench.engine.models import BenchmarkResult
from algobench.exporters.base_exporter import BaseExporter


class MarkdownExporter(BaseExporter):
    """Exports results as a Markdown report.

    The report has two sections:
    - Summary: one table row per result, in store order
    - Detailed Results: one table per algorithm, algorithms in order of first
      appearance, including min and max durations
    """

    file_extension = "md"
    media_type = "text/markdown"

    def _generate_content(self) -> str:
        generated = self._config.generated_at.strftime("%Y-%m-%d %H:%M:%S")
        lines = [
            "# Algorithm Benchmark Results",
            "",
            f"Generated on: {generated}",
            "",
            "## Summary",
            "",
            "| Algorithm | Array Type | Size | Mean Duration | Std Deviation | Memory Used | Runs |",
            "|-----------|------------|------|---------------|---------------|-------------|------|",
        ]
        for r in self._results:
            lines.append(
                f"| {r.algorithm} | {r.array_type} | {r.size} "
                f"| {format_duration(r.mean_duration_ns)} "
                f"| {format_duration(r.std_deviation_ns)} "
                f"| {format_bytes(r.memory_used_bytes)} | {r.runs} |"
            )

        lines.extend(["", "## Detailed Results", ""])
        for algorithm, results in self._group_by_algorithm().items():
            lines.extend(
                [
                    f"### {algorithm}",
                    "",
                    "| Array Type | Size | Mean | Std Dev | Min | Max | Memory |",
                    "|------------|------|------|---------|-----|-----|--------|",
                ]
            )
            for r in results:
                lines.append(
                    f"| {r.array_type} | {r.size} "
                    f"| {format_duration(r.mean_duration_ns)} "
                    f"| {format_duration(r.std_deviation_ns)} "
                    f"| {format_duration(r.min_duration_ns)} "
                    f"| {format_duration(r.max_duration_ns)} "
                    f"| {format_bytes(r.memory_used_bytes)} |"
                )
            lines.append("")

        return "\n".join(lines) + "\n"

    def _group_by_algorithm(self) -> dict[str, list[BenchmarkResult]]:
        grouped: dict[str, list[BenchmarkResult]] = {}
        for result in self._results:
            grouped.setdefault(result.algorithm, []).append(result)
        return grouped
