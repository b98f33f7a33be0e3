# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for input generation and sort verification."""

import pytest

from algobench.common.enums import Distribution
from algobench.data.generator import (
    generate_array,
    get_all_distributions,
    is_sorted,
    make_rng,
    verify_sorting,
)


class TestGenerateArray:
    def test_sorted(self):
        assert generate_array(5, Distribution.SORTED) == [0, 1, 2, 3, 4]

    def test_reverse(self):
        assert generate_array(5, Distribution.REVERSE) == [4, 3, 2, 1, 0]

    def test_random_values_in_range(self, rng):
        values = generate_array(1000, Distribution.RANDOM, rng)
        assert len(values) == 1000
        assert all(0 <= v < 2000 for v in values)
        assert all(type(v) is int for v in values)

    @pytest.mark.parametrize("distribution", list(Distribution))
    def test_zero_size_is_empty(self, distribution):
        assert generate_array(0, distribution) == []

    @pytest.mark.parametrize("distribution", list(Distribution))
    def test_size_one(self, distribution):
        assert len(generate_array(1, distribution)) == 1

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate_array(-1, Distribution.SORTED)

    def test_same_seed_same_array(self):
        first = generate_array(100, Distribution.RANDOM, make_rng(7))
        second = generate_array(100, Distribution.RANDOM, make_rng(7))
        assert first == second

    def test_different_seeds_differ(self):
        first = generate_array(100, Distribution.RANDOM, make_rng(1))
        second = generate_array(100, Distribution.RANDOM, make_rng(2))
        assert first != second

    def test_unseeded_generator_is_used_when_rng_omitted(self):
        assert len(generate_array(10, Distribution.RANDOM)) == 10


class TestDistributions:
    def test_sweep_order(self):
        assert get_all_distributions() == [
            Distribution.RANDOM,
            Distribution.SORTED,
            Distribution.REVERSE,
        ]


class TestVerification:
    @pytest.mark.parametrize(
        "values,expected",
        [([], True), ([1], True), ([1, 1, 2], True), ([2, 1], False)],
    )
    def test_is_sorted(self, values, expected):
        assert is_sorted(values) is expected

    def test_correct_sort_verifies(self):
        assert verify_sorting([3, 1, 2], [1, 2, 3])

    def test_length_mismatch_fails(self):
        assert not verify_sorting([3, 1, 2], [1, 2])

    def test_sorted_but_not_a_permutation_fails(self):
        assert not verify_sorting([3, 1, 2], [1, 2, 4])

    def test_permutation_but_not_sorted_fails(self):
        assert not verify_sorting([3, 1, 2], [2, 1, 3])

    def test_empty(self):
        assert verify_sorting([], [])
