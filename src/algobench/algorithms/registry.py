# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Registry of benchmarkable algorithms.

Each entry is an AlgorithmSpec carrying its kind (sort or search) and the
callable(s) that implement it. Invoking a spec returns a tagged outcome, so
callers never inspect the type of an algorithm's raw return value.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from algobench.algorithms import search, sort
from algobench.common.enums import AlgorithmKind, Distribution
from algobench.common.exceptions import DuplicateAlgorithmError, UnknownAlgorithmError

logger = logging.getLogger(__name__)

__all__ = [
    "AlgorithmOutcome",
    "AlgorithmRegistry",
    "AlgorithmSpec",
    "SearchFunc",
    "SearchOutcome",
    "SortFunc",
    "SortOutcome",
    "default_registry",
]

SortFunc = Callable[[Sequence[int]], list[int]]
SearchFunc = Callable[[Sequence[int], int], int]


@dataclass(frozen=True, slots=True)
class SortOutcome:
    """Output of a sort algorithm."""

    values: list[int]


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Output of a search algorithm: an index into the input, or -1."""

    index: int


AlgorithmOutcome = SortOutcome | SearchOutcome


@dataclass(frozen=True, slots=True)
class AlgorithmSpec:
    """A registered algorithm.

    Attributes:
        name: Stable identifier (e.g., "quick_sort")
        kind: Whether the algorithm sorts or searches
        func: Implementation. For searches this is the path used on
            ascending input.
        unsorted_func: Search path used when the input is not known to be
            ascending. None means func handles any order.
    """

    name: str
    kind: AlgorithmKind
    func: SortFunc | SearchFunc
    unsorted_func: SearchFunc | None = None

    def __post_init__(self) -> None:
        if self.kind == AlgorithmKind.SORT and self.unsorted_func is not None:
            raise ValueError(f"Sort algorithm '{self.name}' cannot set unsorted_func")

    @property
    def is_sort(self) -> bool:
        return self.kind == AlgorithmKind.SORT

    def invoke(
        self,
        values: Sequence[int],
        *,
        target: int = 0,
        distribution: Distribution = Distribution.RANDOM,
    ) -> AlgorithmOutcome:
        """Run the algorithm once.

        Args:
            values: Input array
            target: Value to look for (searches only)
            distribution: Shape of the input; selects the search path

        Returns:
            SortOutcome for sorts, SearchOutcome for searches
        """
        if self.kind == AlgorithmKind.SORT:
            return SortOutcome(self.func(values))

        func = self.func
        if distribution != Distribution.SORTED and self.unsorted_func is not None:
            func = self.unsorted_func
        return SearchOutcome(func(values, target))


class AlgorithmRegistry:
    """Ordered mapping of algorithm name to AlgorithmSpec.

    Iteration order is registration order, which is also sweep order.
    """

    def __init__(self, specs: Sequence[AlgorithmSpec] = ()) -> None:
        self._specs: dict[str, AlgorithmSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: AlgorithmSpec) -> AlgorithmSpec:
        """Add a spec.

        Raises:
            DuplicateAlgorithmError: If the name is already registered
        """
        if spec.name in self._specs:
            raise DuplicateAlgorithmError(spec.name)
        self._specs[spec.name] = spec
        logger.debug(f"Registered {spec.kind} algorithm '{spec.name}'")
        return spec

    def get(self, name: str) -> AlgorithmSpec:
        """Look up a spec by name.

        Raises:
            UnknownAlgorithmError: If no algorithm has that name
        """
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownAlgorithmError(name) from None

    def names(self, kind: AlgorithmKind | None = None) -> list[str]:
        """Names of registered algorithms, optionally filtered by kind."""
        return [spec.name for spec in self.by_kind(kind)]

    def by_kind(self, kind: AlgorithmKind | None = None) -> list[AlgorithmSpec]:
        return [s for s in self._specs.values() if kind is None or s.kind == kind]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[AlgorithmSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)


def default_registry() -> AlgorithmRegistry:
    """Build a registry holding the built-in search and sort algorithms."""
    return AlgorithmRegistry(
        [
            AlgorithmSpec("linear_search", AlgorithmKind.SEARCH, search.linear_search),
            AlgorithmSpec(
                "binary_search",
                AlgorithmKind.SEARCH,
                search.binary_search_sorted,
                unsorted_func=search.binary_search_unsorted,
            ),
            AlgorithmSpec("bubble_sort", AlgorithmKind.SORT, sort.bubble_sort),
            AlgorithmSpec("insertion_sort", AlgorithmKind.SORT, sort.insertion_sort),
            AlgorithmSpec("merge_sort", AlgorithmKind.SORT, sort.merge_sort),
            AlgorithmSpec("quick_sort", AlgorithmKind.SORT, sort.quick_sort),
            AlgorithmSpec("heap_sort", AlgorithmKind.SORT, sort.heap_sort),
            AlgorithmSpec("native_sort", AlgorithmKind.SORT, sort.native_sort),
        ]
    )
