# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Search algorithms.

Every function returns an index into the array it was given, or NOT_FOUND.
"""

from collections.abc import Sequence

from algobench.common.constants import NOT_FOUND

__all__ = [
    "binary_search",
    "binary_search_sorted",
    "binary_search_unsorted",
    "linear_search",
]


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the first index holding target."""
    for i, value in enumerate(values):
        if value == target:
            return i
    return NOT_FOUND


def binary_search(values: Sequence[int], target: int) -> int:
    """Classic binary search over a non-decreasing sequence."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return NOT_FOUND


def binary_search_sorted(values: Sequence[int], target: int) -> int:
    """Binary search on input already known to be ascending."""
    return binary_search(values, target)


def binary_search_unsorted(values: Sequence[int], target: int) -> int:
    """Binary search on input in arbitrary order.

    Sorts a private copy, searches it, then maps the hit back to the first
    position of the same value in the original input. The returned index is
    always in the original array's index space.
    """
    ordered = sorted(values)
    index = binary_search(ordered, target)
    if index == NOT_FOUND:
        return NOT_FOUND
    return linear_search(values, ordered[index])
