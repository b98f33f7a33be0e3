# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for benchmark results."""

import csv
import io

from algobench.exporters.base_exporter import BaseExporter

CSV_HEADER = [
    "Algorithm",
    "Array Type",
    "Size",
    "Mean Duration (ns)",
    "Std Deviation (ns)",
    "Min Duration (ns)",
    "Max Duration (ns)",
    "Memory Used (bytes)",
    "Runs",
]


class CsvExporter(BaseExporter):
    """Exports results as CSV, one row per result in store order.

    Durations are raw integer nanoseconds and memory is raw bytes, so the
    file can be loaded into a spreadsheet without unit parsing.
    """

    file_extension = "csv"
    media_type = "text/csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for result in self._results:
            writer.writerow(
                [
                    result.algorithm,
                    result.array_type,
                    result.size,
                    result.mean_duration_ns,
                    result.std_deviation_ns,
                    result.min_duration_ns,
                    result.max_duration_ns,
                    result.memory_used_bytes,
                    result.runs,
                ]
            )
        return buf.getvalue()
