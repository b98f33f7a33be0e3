# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for benchmark measurement."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from algobench.common.enums import Distribution

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "TrialObservation",
]


class BenchmarkConfig(BaseModel):
    """Configuration for measuring one algorithm on one input shape.

    Attributes:
        algorithm: Registered algorithm name (e.g., "merge_sort")
        distribution: Shape of the generated input
        size: Number of elements in the generated input
        runs: Number of trials to execute
        target: Value to look for. Only used by search algorithms.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: str
    distribution: Distribution = Distribution.RANDOM
    size: int = Field(ge=0)
    runs: int = Field(default=1, ge=1)
    target: int = 0

    @field_validator("distribution", mode="before")
    @classmethod
    def parse_distribution(cls, v: str | Distribution) -> Distribution:
        """Accept aliases such as "ascending" or "Reverse Sorted"."""
        if isinstance(v, str):
            return Distribution.parse(v)
        return v


@dataclass(slots=True)
class TrialObservation:
    """Measurements from one trial. Discarded after reduction.

    Attributes:
        duration_ns: Wall-clock time of the algorithm call
        memory_bytes: Heap growth across the call, floored at zero
        verified: Sort verification outcome; None for searches
    """

    duration_ns: int
    memory_bytes: int
    verified: bool | None = None


class BenchmarkResult(BaseModel):
    """Summary statistics for one BenchmarkConfig.

    Attributes:
        algorithm: Algorithm name
        array_type: Display name of the input distribution (e.g., "Reverse Sorted")
        size: Input size
        runs: Number of trials aggregated
        mean_duration_ns: Mean trial duration
        std_deviation_ns: Sample standard deviation (N-1), truncated to whole microseconds
        min_duration_ns: Fastest trial
        max_duration_ns: Slowest trial
        memory_used_bytes: Mean heap growth per trial
    """

    model_config = ConfigDict(frozen=True)

    algorithm: str
    array_type: str
    size: int
    runs: int
    mean_duration_ns: int
    std_deviation_ns: int
    min_duration_ns: int
    max_duration_ns: int
    memory_used_bytes: int
