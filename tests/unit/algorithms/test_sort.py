# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the sort algorithms."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algobench.algorithms.sort import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    native_sort,
    quick_sort,
)

ALL_SORTS = [bubble_sort, insertion_sort, merge_sort, quick_sort, heap_sort, native_sort]


@pytest.mark.parametrize("sort_func", ALL_SORTS, ids=lambda f: f.__name__)
class TestSortAlgorithms:
    """Behaviour shared by every sort."""

    @pytest.mark.parametrize(
        "values,expected",
        [
            ([], []),
            ([7], [7]),
            ([2, 1], [1, 2]),
            ([64, 34, 25, 12, 22, 11, 90], [11, 12, 22, 25, 34, 64, 90]),
            ([3, 1, 3, 1, 3], [1, 1, 3, 3, 3]),
            ([5, 5, 5, 5], [5, 5, 5, 5]),
            ([-3, 0, -1, 2], [-3, -1, 0, 2]),
        ],
    )
    def test_sorts_known_inputs(self, sort_func, values, expected):
        assert sort_func(values) == expected

    def test_sorted_and_reverse_inputs(self, sort_func):
        assert sort_func(list(range(500))) == list(range(500))
        assert sort_func(list(range(499, -1, -1))) == list(range(500))

    def test_does_not_mutate_input(self, sort_func):
        values = [9, 3, 7, 1, 8]
        sort_func(values)
        assert values == [9, 3, 7, 1, 8]

    def test_returns_new_list(self, sort_func):
        values = [1, 2, 3]
        assert sort_func(values) is not values

    @settings(max_examples=50, deadline=None)
    @given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
    def test_matches_builtin_sorted(self, sort_func, values):
        assert sort_func(values) == sorted(values)


class TestQuickSort:
    def test_large_sorted_input_does_not_recurse(self):
        # Would exceed the default recursion limit with a naive recursive quick sort.
        values = list(range(20_000))
        assert quick_sort(values) == values
