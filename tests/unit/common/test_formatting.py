# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from algobench.common.formatting import format_bytes, format_duration


class TestFormatDuration:
    @pytest.mark.parametrize(
        "nanos,expected",
        [
            (0, "0.00 ns"),
            (999, "999.00 ns"),
            (1_000, "1.00 μs"),
            (1_500, "1.50 μs"),
            (2_340_000, "2.34 ms"),
            (1_000_000_000, "1.00 s"),
            (90_500_000_000, "90.50 s"),
        ],
    )
    def test_units(self, nanos, expected):
        assert format_duration(nanos) == expected


class TestFormatBytes:
    @pytest.mark.parametrize(
        "num_bytes,expected",
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024**2, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
        ],
    )
    def test_units(self, num_bytes, expected):
        assert format_bytes(num_bytes) == expected
