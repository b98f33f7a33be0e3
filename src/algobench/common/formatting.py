# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Human-readable formatting for durations and byte counts."""

from algobench.common.constants import (
    BYTES_PER_KIB,
    NANOS_PER_MICROS,
    NANOS_PER_MILLIS,
    NANOS_PER_SECOND,
)

_BYTE_UNITS = "KMGTPE"


def format_duration(nanos: int) -> str:
    """Format a duration in nanoseconds using the largest fitting unit.

    Examples:
        >>> format_duration(512)
        '512.00 ns'
        >>> format_duration(1_500)
        '1.50 μs'
        >>> format_duration(2_340_000)
        '2.34 ms'
    """
    if nanos < NANOS_PER_MICROS:
        return f"{nanos:.2f} ns"
    if nanos < NANOS_PER_MILLIS:
        return f"{nanos / NANOS_PER_MICROS:.2f} μs"
    if nanos < NANOS_PER_SECOND:
        return f"{nanos / NANOS_PER_MILLIS:.2f} ms"
    return f"{nanos / NANOS_PER_SECOND:.2f} s"


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with binary (1024) prefixes.

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(1536)
        '1.5 KB'
    """
    if num_bytes < BYTES_PER_KIB:
        return f"{num_bytes} B"
    div, exp = BYTES_PER_KIB, 0
    n = num_bytes // BYTES_PER_KIB
    while n >= BYTES_PER_KIB and exp < len(_BYTE_UNITS) - 1:
        div *= BYTES_PER_KIB
        exp += 1
        n //= BYTES_PER_KIB
    return f"{num_bytes / div:.1f} {_BYTE_UNITS[exp]}B"
