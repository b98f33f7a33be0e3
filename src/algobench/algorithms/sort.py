# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sort algorithms.

Every function takes a sequence of ints and returns a NEW sorted list; the
input is never mutated.
"""

from collections.abc import Sequence

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "native_sort",
    "quick_sort",
]


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Bubble sort with early exit when a pass makes no swaps."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def merge_sort(values: Sequence[int]) -> list[int]:
    """Top-down merge sort. Stable."""
    if len(values) <= 1:
        return list(values)
    mid = len(values) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _merge(left: list[int], right: list[int]) -> list[int]:
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def quick_sort(values: Sequence[int]) -> list[int]:
    """Quick sort with median-of-three pivot selection.

    Uses an explicit stack and always pushes the larger partition first, so
    stack depth stays O(log n) even on sorted or reverse-sorted input.
    """
    result = list(values)
    stack = [(0, len(result) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pivot_index = _partition(result, low, high)
        left, right = (low, pivot_index - 1), (pivot_index + 1, high)
        # Pop the smaller side next.
        if left[1] - left[0] > right[1] - right[0]:
            stack.append(left)
            stack.append(right)
        else:
            stack.append(right)
            stack.append(left)
    return result


def _partition(arr: list[int], low: int, high: int) -> int:
    """Lomuto partition around the median of arr[low], arr[mid], arr[high]."""
    mid = (low + high) // 2
    if arr[mid] < arr[low]:
        arr[mid], arr[low] = arr[low], arr[mid]
    if arr[high] < arr[low]:
        arr[high], arr[low] = arr[low], arr[high]
    if arr[mid] < arr[high]:
        arr[mid], arr[high] = arr[high], arr[mid]
    # arr[high] now holds the median.
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def heap_sort(values: Sequence[int]) -> list[int]:
    result = list(values)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _sift_down(arr: list[int], n: int, i: int) -> None:
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2
        if left < n and arr[left] > arr[largest]:
            largest = left
        if right < n and arr[right] > arr[largest]:
            largest = right
        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        i = largest


def native_sort(values: Sequence[int]) -> list[int]:
    """The interpreter's built-in sort (Timsort), as a baseline."""
    return sorted(values)
