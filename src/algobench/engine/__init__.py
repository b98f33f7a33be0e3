# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark measurement engine and result store."""

from algobench.engine.memory import MemoryProbe, NullProbe, TracemallocProbe
from algobench.engine.models import BenchmarkConfig, BenchmarkResult, TrialObservation
from algobench.engine.runner import BenchmarkRunner
from algobench.engine.statistics import DurationStats, summarize_durations
from algobench.engine.store import ResultStore

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "DurationStats",
    "MemoryProbe",
    "NullProbe",
    "ResultStore",
    "TracemallocProbe",
    "TrialObservation",
    "summarize_durations",
]
