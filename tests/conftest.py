# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for AlgoBench tests."""

import itertools
import logging
from datetime import datetime

import pytest

from algobench.data.generator import make_rng
from algobench.engine.memory import NullProbe
from algobench.engine.models import BenchmarkResult
from algobench.engine.runner import BenchmarkRunner
from algobench.exporters import ExporterConfig


@pytest.fixture
def rng():
    """Seeded random source so generated arrays are reproducible."""
    return make_rng(42)


@pytest.fixture
def runner(rng):
    """Runner with a seeded rng and no memory tracing."""
    return BenchmarkRunner(rng=rng, memory_probe=NullProbe())


@pytest.fixture
def step_clock():
    """Clock that advances 1000 ns per reading, so every trial takes 1000 ns."""
    return itertools.count(start=0, step=1_000).__next__


@pytest.fixture
def sample_results() -> list[BenchmarkResult]:
    return [
        BenchmarkResult(
            algorithm="quick_sort",
            array_type="Random",
            size=1000,
            runs=5,
            mean_duration_ns=1_500_000,
            std_deviation_ns=12_000,
            min_duration_ns=1_400_000,
            max_duration_ns=1_650_000,
            memory_used_bytes=8192,
        ),
        BenchmarkResult(
            algorithm="linear_search",
            array_type="Sorted",
            size=100,
            runs=3,
            mean_duration_ns=850,
            std_deviation_ns=0,
            min_duration_ns=700,
            max_duration_ns=1_000,
            memory_used_bytes=0,
        ),
        BenchmarkResult(
            algorithm="quick_sort",
            array_type="Reverse Sorted",
            size=1000,
            runs=5,
            mean_duration_ns=2_000_000,
            std_deviation_ns=30_000,
            min_duration_ns=1_900_000,
            max_duration_ns=2_100_000,
            memory_used_bytes=16384,
        ),
    ]


@pytest.fixture
def exporter_config(sample_results, tmp_path) -> ExporterConfig:
    return ExporterConfig(
        results=sample_results,
        output_dir=tmp_path,
        generated_at=datetime(2026, 1, 2, 3, 4, 5),
    )


@pytest.fixture
def restore_algobench_logger():
    """Undo handler and level changes made by setup_rich_logging."""
    logger = logging.getLogger("algobench")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
