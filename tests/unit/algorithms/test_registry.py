# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for AlgorithmRegistry and AlgorithmSpec."""

import pytest

from algobench.algorithms.registry import (
    AlgorithmRegistry,
    AlgorithmSpec,
    SearchOutcome,
    SortOutcome,
    default_registry,
)
from algobench.algorithms.search import binary_search, linear_search
from algobench.algorithms.sort import native_sort
from algobench.common.enums import AlgorithmKind, Distribution
from algobench.common.exceptions import DuplicateAlgorithmError, UnknownAlgorithmError


class TestDefaultRegistry:
    def test_search_order(self):
        assert default_registry().names(AlgorithmKind.SEARCH) == [
            "linear_search",
            "binary_search",
        ]

    def test_sort_order(self):
        assert default_registry().names(AlgorithmKind.SORT) == [
            "bubble_sort",
            "insertion_sort",
            "merge_sort",
            "quick_sort",
            "heap_sort",
            "native_sort",
        ]

    def test_names_without_kind_lists_everything_in_registration_order(self):
        registry = default_registry()
        assert len(registry) == 8
        assert registry.names()[:2] == ["linear_search", "binary_search"]
        assert [spec.name for spec in registry] == registry.names()

    def test_contains(self):
        registry = default_registry()
        assert "merge_sort" in registry
        assert "bogo_sort" not in registry


class TestRegistryLookup:
    def test_unknown_algorithm_raises_with_name(self):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            default_registry().get("bogo_sort")
        assert exc_info.value.algorithm == "bogo_sort"
        assert "bogo_sort" in str(exc_info.value)

    def test_duplicate_registration_raises(self):
        registry = AlgorithmRegistry(
            [AlgorithmSpec("native_sort", AlgorithmKind.SORT, native_sort)]
        )
        with pytest.raises(DuplicateAlgorithmError):
            registry.register(AlgorithmSpec("native_sort", AlgorithmKind.SORT, sorted))


class TestAlgorithmSpec:
    def test_sort_spec_returns_sort_outcome(self):
        spec = default_registry().get("merge_sort")
        outcome = spec.invoke([3, 1, 2])
        assert outcome == SortOutcome([1, 2, 3])
        assert spec.is_sort

    def test_search_spec_returns_search_outcome(self):
        spec = default_registry().get("linear_search")
        outcome = spec.invoke([5, 6, 7], target=7)
        assert outcome == SearchOutcome(2)
        assert not spec.is_sort

    def test_binary_search_on_sorted_uses_direct_path(self):
        calls = []

        def sorted_path(values, target):
            calls.append("sorted")
            return binary_search(values, target)

        def unsorted_path(values, target):
            calls.append("unsorted")
            return linear_search(values, target)

        spec = AlgorithmSpec(
            "binary_search", AlgorithmKind.SEARCH, sorted_path, unsorted_func=unsorted_path
        )
        spec.invoke([1, 2, 3], target=2, distribution=Distribution.SORTED)
        spec.invoke([3, 2, 1], target=2, distribution=Distribution.REVERSE)
        spec.invoke([2, 3, 1], target=2, distribution=Distribution.RANDOM)
        assert calls == ["sorted", "unsorted", "unsorted"]

    @pytest.mark.parametrize(
        "distribution", [Distribution.RANDOM, Distribution.REVERSE, Distribution.SORTED]
    )
    def test_binary_search_index_refers_to_original_array(self, distribution):
        values = {
            Distribution.RANDOM: [8, 3, 5, 1, 9],
            Distribution.REVERSE: [9, 8, 5, 3, 1],
            Distribution.SORTED: [1, 3, 5, 8, 9],
        }[distribution]
        outcome = default_registry().get("binary_search").invoke(
            values, target=5, distribution=distribution
        )
        assert values[outcome.index] == 5

    def test_sort_spec_rejects_unsorted_func(self):
        with pytest.raises(ValueError, match="cannot set unsorted_func"):
            AlgorithmSpec(
                "bad", AlgorithmKind.SORT, native_sort, unsorted_func=linear_search
            )
