# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io

from rich.console import Console

from algobench.exporters import ConsoleExporter


def make_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


class TestConsoleExporter:
    def test_table_columns(self, sample_results):
        table = ConsoleExporter(sample_results).build_table()
        assert [c.header for c in table.columns] == [
            "Algorithm",
            "Array Type",
            "Size",
            "Runs",
            "Mean",
            "Std Dev",
            "Min",
            "Max",
            "Memory",
        ]
        assert table.row_count == 3

    def test_prints_formatted_values(self, sample_results):
        console, buffer = make_console()
        ConsoleExporter(sample_results).export(console)
        output = buffer.getvalue()
        assert "BENCHMARK RESULTS" in output
        assert "quick_sort" in output
        assert "1.50 ms" in output
        assert "8.0 KB" in output

    def test_no_results(self):
        console, buffer = make_console()
        ConsoleExporter([]).export(console)
        assert "No results to display." in buffer.getvalue()
