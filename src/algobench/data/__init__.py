# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Synthetic input generation."""

from algobench.data.generator import (
    generate_array,
    get_all_distributions,
    make_rng,
    verify_sorting,
)

__all__ = [
    "generate_array",
    "get_all_distributions",
    "make_rng",
    "verify_sorting",
]
