# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-wide settings loaded from ``ALGOBENCH_*`` environment variables.

Usage:
    from algobench.common.environment import Environment

    Environment.BENCHMARK.SWEEP_SIZES   # ALGOBENCH_BENCHMARK_SWEEP_SIZES='[100, 1000]'
    Environment.WEB.PORT                # ALGOBENCH_WEB_PORT=9090
    Environment.LOG_LEVEL               # ALGOBENCH_LOG_LEVEL=DEBUG
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]


class _BenchmarkSettings(BaseSettings):
    """Defaults for benchmark runs and sweeps."""

    model_config = SettingsConfigDict(env_prefix="ALGOBENCH_BENCHMARK_")

    DEFAULT_SIZE: int = Field(
        default=1000, ge=0, description="Array size used when none is given."
    )
    DEFAULT_RUNS: int = Field(
        default=5, ge=1, description="Number of trials used when none is given."
    )
    SWEEP_SIZES: list[int] = Field(
        default=[100, 1000, 5000],
        description="Array sizes covered by the search, sort and comprehensive sweeps. "
        "Quadratic sorts make sizes above ~10000 very slow in pure Python.",
    )
    MEASURE_MEMORY: bool = Field(
        default=True,
        description="Trace heap allocations with tracemalloc during each trial. "
        "Disable to remove tracing overhead from the timing samples.",
    )


class _WebSettings(BaseSettings):
    """Settings for the JSON web API."""

    model_config = SettingsConfigDict(env_prefix="ALGOBENCH_WEB_")

    HOST: str = Field(default="127.0.0.1", description="Interface to bind.")
    PORT: int = Field(default=8080, ge=0, le=65535, description="Port to bind.")
    REQUEST_TIMEOUT: float = Field(
        default=5.0, gt=0, description="Seconds to wait for a request head and body."
    )
    MAX_BODY_BYTES: int = Field(
        default=65536, ge=0, description="Largest accepted request body."
    )


class _Environment(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ALGOBENCH_")

    LOG_LEVEL: str = Field(default="INFO", description="Root log level for algobench.")
    BENCHMARK: _BenchmarkSettings = Field(default_factory=_BenchmarkSettings)
    WEB: _WebSettings = Field(default_factory=_WebSettings)


Environment = _Environment()
