# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Input array generation and sort verification helpers."""

from collections.abc import Sequence

import numpy as np

from algobench.common.enums import Distribution

__all__ = [
    "generate_array",
    "get_all_distributions",
    "make_rng",
    "verify_sorting",
]


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source used for array generation.

    Args:
        seed: Seed for reproducible arrays. None draws fresh OS entropy.
    """
    return np.random.default_rng(seed)


def generate_array(
    size: int,
    distribution: Distribution,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """Generate an integer array of the given size and shape.

    - RANDOM: values drawn uniformly from [0, 2 * size)
    - SORTED: 0, 1, ..., size - 1
    - REVERSE: size - 1, ..., 1, 0

    Args:
        size: Number of elements (must be >= 0)
        distribution: Shape of the array
        rng: Random source for RANDOM arrays. A fresh unseeded generator is
            used when omitted.

    Returns:
        A new list of Python ints

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Invalid array size: {size}. Size must be non-negative.")

    if distribution == Distribution.SORTED:
        return list(range(size))
    if distribution == Distribution.REVERSE:
        return list(range(size - 1, -1, -1))

    if size == 0:
        return []
    if rng is None:
        rng = make_rng()
    return rng.integers(0, size * 2, size=size).tolist()


def get_all_distributions() -> list[Distribution]:
    """Return every distribution in sweep order."""
    return [Distribution.RANDOM, Distribution.SORTED, Distribution.REVERSE]


def is_sorted(values: Sequence[int]) -> bool:
    """Check whether values are in non-decreasing order."""
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))


def verify_sorting(original: Sequence[int], result: Sequence[int]) -> bool:
    """Check that result is the non-decreasing permutation of original.

    The check does not trust the algorithm under test: it compares against a
    canonically sorted copy of the original input, element by element.
    """
    if len(original) != len(result):
        return False
    expected = sorted(original)
    return all(a == b for a, b in zip(expected, result, strict=True))
