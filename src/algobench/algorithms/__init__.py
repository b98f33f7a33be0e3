# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Algorithm catalog: search and sort implementations plus their registry."""

from algobench.algorithms.registry import (
    AlgorithmOutcome,
    AlgorithmRegistry,
    AlgorithmSpec,
    SearchOutcome,
    SortOutcome,
    default_registry,
)

__all__ = [
    "AlgorithmOutcome",
    "AlgorithmRegistry",
    "AlgorithmSpec",
    "SearchOutcome",
    "SortOutcome",
    "default_registry",
]
