# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the CLI run, display and export helpers."""

import io
from unittest.mock import patch

import orjson
from rich.console import Console

from algobench.algorithms.registry import AlgorithmRegistry, AlgorithmSpec, default_registry
from algobench.algorithms.search import linear_search
from algobench.cli_runner import (
    export_results,
    print_algorithms,
    print_results,
    run_benchmark_command,
)
from algobench.common.enums import AlgorithmKind, Distribution
from algobench.engine.memory import NullProbe
from algobench.engine.runner import BenchmarkRunner


def failing_search(values, target):
    raise RuntimeError("boom")


class TestRunBenchmarkCommand:
    def test_single_benchmark(self, runner):
        assert run_benchmark_command(runner, "insertion_sort", Distribution.SORTED, 100, 2)
        [result] = runner.get_results()
        assert result.algorithm == "insertion_sort"
        assert result.array_type == "Sorted"
        assert result.runs == 2

    def test_clears_previous_results(self, runner):
        run_benchmark_command(runner, "native_sort", Distribution.RANDOM, 10, 1)
        run_benchmark_command(runner, "merge_sort", Distribution.RANDOM, 10, 1)
        assert [r.algorithm for r in runner.get_results()] == ["merge_sort"]

    def test_all_runs_both_sweeps(self, runner):
        assert run_benchmark_command(
            runner, "all", Distribution.RANDOM, 999, 1, sweep_sizes=[10, 20]
        )
        results = runner.get_results()
        assert len(results) == (2 + 6) * 3 * 2
        assert {r.size for r in results} == {10, 20}

    def test_all_uses_configured_sweep_sizes(self, runner):
        with patch("algobench.cli_runner.Environment.BENCHMARK.SWEEP_SIZES", [15]):
            run_benchmark_command(runner, "all", Distribution.RANDOM, 999, 1)
        assert {r.size for r in runner.get_results()} == {15}

    def test_unknown_algorithm_returns_false(self, runner):
        assert not run_benchmark_command(runner, "bogo_sort", Distribution.RANDOM, 10, 1)
        assert runner.get_results() == ()

    def test_invalid_runs_returns_false(self, runner):
        assert not run_benchmark_command(runner, "merge_sort", Distribution.RANDOM, 10, 0)

    def test_sweep_failure_keeps_partial_results(self, rng):
        registry = AlgorithmRegistry(
            [
                AlgorithmSpec("linear_search", AlgorithmKind.SEARCH, linear_search),
                AlgorithmSpec("failing_search", AlgorithmKind.SEARCH, failing_search),
            ]
        )
        runner = BenchmarkRunner(registry=registry, rng=rng, memory_probe=NullProbe())
        assert not run_benchmark_command(
            runner, "all", Distribution.RANDOM, 0, 1, sweep_sizes=[10]
        )
        assert len(runner.get_results()) == 3


class TestPrinting:
    def test_print_results(self, sample_results):
        buffer = io.StringIO()
        print_results(sample_results, Console(file=buffer, width=200))
        assert "linear_search" in buffer.getvalue()

    def test_print_algorithms(self):
        buffer = io.StringIO()
        print_algorithms(default_registry(), Console(file=buffer, width=200))
        output = buffer.getvalue()
        for name in default_registry().names():
            assert name in output
        assert "search" in output
        assert "sort" in output


class TestExportResults:
    def test_writes_requested_formats(self, sample_results, tmp_path):
        written = export_results(
            sample_results,
            csv_path=tmp_path / "r.csv",
            json_path=tmp_path / "r.json",
        )
        assert written == [tmp_path / "r.csv", tmp_path / "r.json"]
        assert not (tmp_path / "r.md").exists()
        assert orjson.loads((tmp_path / "r.json").read_bytes())["num_results"] == 3

    def test_nothing_requested(self, sample_results):
        assert export_results(sample_results) == []

    def test_no_results_writes_nothing(self, tmp_path):
        assert export_results([], md_path=tmp_path / "r.md") == []
        assert not (tmp_path / "r.md").exists()

    def test_failing_format_does_not_stop_others(self, sample_results, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        written = export_results(
            sample_results,
            csv_path=blocker / "r.csv",
            md_path=tmp_path / "r.md",
        )
        assert written == [tmp_path / "r.md"]
