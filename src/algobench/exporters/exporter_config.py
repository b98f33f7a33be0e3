# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for result exporters."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from algobench.engine.models import BenchmarkResult


@dataclass(slots=True)
class ExporterConfig:
    """Configuration for file exporters.

    Attributes:
        results: Results to export, in store order
        output_dir: Directory where the export file is written by default
        file_prefix: Stem prefix of generated file names
        generated_at: Timestamp used in file names and report headers
    """

    results: Sequence[BenchmarkResult]
    output_dir: Path = field(default_factory=Path.cwd)
    file_prefix: str = "results"
    generated_at: datetime = field(default_factory=datetime.now)
