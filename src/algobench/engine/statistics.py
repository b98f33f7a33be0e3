# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Reduction of per-trial samples to summary statistics."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from algobench.common.constants import NANOS_PER_MICROS

__all__ = [
    "DurationStats",
    "mean_int",
    "sample_std_truncated",
    "summarize_durations",
    "summarize_memory",
]


@dataclass(slots=True)
class DurationStats:
    """Duration statistics across trials, all in integer nanoseconds.

    Attributes:
        mean: Arithmetic mean (truncating integer division)
        std: Sample standard deviation (ddof=1), truncated to whole microseconds
        min: Fastest trial
        max: Slowest trial
    """

    mean: int
    std: int
    min: int
    max: int


def mean_int(values: Sequence[int]) -> int:
    """Integer mean with truncating division. Zero for no samples."""
    if not values:
        return 0
    return sum(values) // len(values)


def sample_std_truncated(values: Sequence[int]) -> int:
    """Sample standard deviation in ns, truncated to whole microseconds.

    Uses the N-1 divisor. Returns 0 for fewer than two samples. Any
    sub-microsecond remainder is discarded, so 1_999 ns reports as 1_000 ns.
    """
    if len(values) <= 1:
        return 0
    std = float(np.std(np.asarray(values, dtype=np.float64), ddof=1))
    return int(std) // NANOS_PER_MICROS * NANOS_PER_MICROS


def summarize_durations(durations_ns: Sequence[int]) -> DurationStats:
    """Reduce duration samples to mean, std, min and max."""
    if not durations_ns:
        return DurationStats(mean=0, std=0, min=0, max=0)
    return DurationStats(
        mean=mean_int(durations_ns),
        std=sample_std_truncated(durations_ns),
        min=min(durations_ns),
        max=max(durations_ns),
    )


def summarize_memory(memory_bytes: Sequence[int]) -> int:
    """Reduce memory samples to their integer mean."""
    return mean_int(memory_bytes)
