# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark measurement engine."""

import logging
import time
from collections.abc import Callable, Sequence

import numpy as np

from algobench.algorithms.registry import (
    AlgorithmRegistry,
    AlgorithmSpec,
    SortOutcome,
    default_registry,
)
from algobench.common.enums import AlgorithmKind
from algobench.common.environment import Environment
from algobench.common.exceptions import SweepError, VerificationError
from algobench.data.generator import (
    generate_array,
    get_all_distributions,
    make_rng,
    verify_sorting,
)
from algobench.engine.memory import MemoryProbe, NullProbe, TracemallocProbe
from algobench.engine.models import BenchmarkConfig, BenchmarkResult, TrialObservation
from algobench.engine.statistics import summarize_durations, summarize_memory
from algobench.engine.store import ResultStore

logger = logging.getLogger(__name__)

__all__ = [
    "BenchmarkRunner",
]


class BenchmarkRunner:
    """Runs benchmarks and keeps their results.

    For each BenchmarkConfig the runner executes ``runs`` independent trials.
    Every trial gets a freshly generated input, is bracketed by the memory
    probe and the clock, and (for sorts) is verified against a canonically
    sorted copy of its input. Samples are then reduced to one
    BenchmarkResult, which is appended to the result store.

    Timings include tracemalloc overhead while memory is measured. Set
    ALGOBENCH_BENCHMARK_MEASURE_MEMORY=false for cleaner durations.

    Execution is strictly sequential. The runner is not thread-safe.
    """

    def __init__(
        self,
        registry: AlgorithmRegistry | None = None,
        store: ResultStore | None = None,
        rng: np.random.Generator | None = None,
        memory_probe: MemoryProbe | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        """Initialize BenchmarkRunner.

        Args:
            registry: Algorithms available to benchmark. Defaults to the built-in catalog.
            store: Where results are appended. A new empty store by default.
            rng: Random source for input generation. Unseeded by default.
            memory_probe: Heap probe. Defaults to tracemalloc, or a no-op probe
                when ALGOBENCH_BENCHMARK_MEASURE_MEMORY is false.
            clock: Monotonic nanosecond clock
        """
        self.registry = registry if registry is not None else default_registry()
        self.store = store if store is not None else ResultStore()
        self._rng = rng if rng is not None else make_rng()
        if memory_probe is None:
            memory_probe = (
                TracemallocProbe()
                if Environment.BENCHMARK.MEASURE_MEMORY
                else NullProbe()
            )
        self._memory_probe = memory_probe
        self._clock = clock

    def run_one(self, config: BenchmarkConfig) -> BenchmarkResult:
        """Measure one algorithm on one input shape and store the result.

        Args:
            config: What to run and how many times

        Returns:
            The stored BenchmarkResult

        Raises:
            UnknownAlgorithmError: If config.algorithm is not registered.
                No trial runs.
            VerificationError: If any sort trial returns a wrong result.
                Nothing is stored.
        """
        spec = self.registry.get(config.algorithm)

        logger.debug(
            f"Benchmarking {spec.name} on {config.distribution.display_name} "
            f"array of size {config.size} ({config.runs} runs)"
        )

        durations: list[int] = []
        memory_usages: list[int] = []
        try:
            for run in range(config.runs):
                observation = self._run_trial(spec, config)
                if observation.verified is False:
                    raise VerificationError(spec.name)
                durations.append(observation.duration_ns)
                memory_usages.append(observation.memory_bytes)
                logger.debug(
                    f"[{run + 1}/{config.runs}] {spec.name}: "
                    f"{observation.duration_ns} ns, {observation.memory_bytes} B"
                )
        finally:
            self._memory_probe.close()

        stats = summarize_durations(durations)
        result = BenchmarkResult(
            algorithm=spec.name,
            array_type=config.distribution.display_name,
            size=config.size,
            runs=config.runs,
            mean_duration_ns=stats.mean,
            std_deviation_ns=stats.std,
            min_duration_ns=stats.min,
            max_duration_ns=stats.max,
            memory_used_bytes=summarize_memory(memory_usages),
        )
        self.store.append(result)

        logger.info(
            f"{result.algorithm} ({result.array_type}, n={result.size}): "
            f"mean {result.mean_duration_ns} ns over {result.runs} runs"
        )
        return result

    def _run_trial(
        self, spec: AlgorithmSpec, config: BenchmarkConfig
    ) -> TrialObservation:
        """Execute one trial on a freshly generated input."""
        values = generate_array(config.size, config.distribution, self._rng)
        # Kept so verification still sees the input if an algorithm mutates it.
        original = list(values) if spec.is_sort else values

        self._memory_probe.before()
        start = self._clock()
        outcome = spec.invoke(
            values, target=config.target, distribution=config.distribution
        )
        duration = self._clock() - start
        memory_used = self._memory_probe.after()

        verified = None
        if isinstance(outcome, SortOutcome):
            verified = verify_sorting(original, outcome.values)
        return TrialObservation(
            duration_ns=duration, memory_bytes=memory_used, verified=verified
        )

    def run_search_sweep(
        self, sizes: Sequence[int], runs: int
    ) -> list[BenchmarkResult]:
        """Benchmark every search algorithm on every distribution and size.

        The target for each size is ``size // 2``.

        Raises:
            SweepError: On the first failing benchmark. Results stored before
                the failure are kept.
        """
        return self._run_sweep(AlgorithmKind.SEARCH, sizes, runs)

    def run_sort_sweep(self, sizes: Sequence[int], runs: int) -> list[BenchmarkResult]:
        """Benchmark every sort algorithm on every distribution and size.

        Raises:
            SweepError: On the first failing benchmark. Results stored before
                the failure are kept.
        """
        return self._run_sweep(AlgorithmKind.SORT, sizes, runs)

    def run_all(self, sizes: Sequence[int], runs: int) -> list[BenchmarkResult]:
        """Run the search sweep followed by the sort sweep."""
        results = self.run_search_sweep(sizes, runs)
        results.extend(self.run_sort_sweep(sizes, runs))
        return results

    def _run_sweep(
        self, kind: AlgorithmKind, sizes: Sequence[int], runs: int
    ) -> list[BenchmarkResult]:
        """Run algorithm x distribution x size, in that nesting order."""
        specs = self.registry.by_kind(kind)
        distributions = get_all_distributions()
        total = len(specs) * len(distributions) * len(sizes)
        logger.info(f"Running {kind} sweep: {total} benchmarks, {runs} runs each")

        results = []
        for spec in specs:
            for distribution in distributions:
                for size in sizes:
                    try:
                        config = BenchmarkConfig(
                            algorithm=spec.name,
                            distribution=distribution,
                            size=size,
                            runs=runs,
                            target=size // 2 if kind == AlgorithmKind.SEARCH else 0,
                        )
                        results.append(self.run_one(config))
                    except Exception as e:
                        raise SweepError(spec.name, str(e)) from e
        return results

    def get_results(self) -> tuple[BenchmarkResult, ...]:
        return self.store.all()

    def clear_results(self) -> None:
        self.store.clear()
