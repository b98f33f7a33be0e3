# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared enums, settings, errors and helpers."""

from algobench.common.enums import AlgorithmKind, Distribution
from algobench.common.exceptions import (
    AlgoBenchError,
    DuplicateAlgorithmError,
    ExportError,
    SweepError,
    UnknownAlgorithmError,
    VerificationError,
)

__all__ = [
    "AlgoBenchError",
    "AlgorithmKind",
    "Distribution",
    "DuplicateAlgorithmError",
    "ExportError",
    "SweepError",
    "UnknownAlgorithmError",
    "VerificationError",
]
