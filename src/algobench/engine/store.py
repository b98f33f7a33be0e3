# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-memory store of completed benchmark results."""

from collections.abc import Iterator

from algobench.engine.models import BenchmarkResult

__all__ = ["ResultStore"]


class ResultStore:
    """Ordered, append-only collection of BenchmarkResult.

    Insertion order is preserved and is the only ordering guarantee. The only
    way to remove results is ``clear()``. Not thread-safe: callers that
    share a store across threads must serialize access.
    """

    def __init__(self) -> None:
        self._results: list[BenchmarkResult] = []

    def append(self, result: BenchmarkResult) -> None:
        self._results.append(result)

    def all(self) -> tuple[BenchmarkResult, ...]:
        """Return a read-only snapshot of the stored results."""
        return tuple(self._results)

    def clear(self) -> None:
        self._results = []

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[BenchmarkResult]:
        return iter(self.all())
