# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

NANOS_PER_MICROS = 1_000
NANOS_PER_MILLIS = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

BYTES_PER_KIB = 1024

NOT_FOUND = -1
"""Index returned by search algorithms when the target is absent."""

ALL_ALGORITHMS = "all"
"""Pseudo algorithm name that selects the full search and sort sweep."""
