# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Best-effort heap allocation probes.

A probe brackets one algorithm call: ``before()`` forces a garbage
collection and snapshots allocated bytes, ``after()`` snapshots again and
returns the growth. The figure is advisory; it reflects Python objects
traced by tracemalloc, not process RSS.
"""

import gc
import logging
import tracemalloc
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "MemoryProbe",
    "NullProbe",
    "TracemallocProbe",
]


class MemoryProbe(ABC):
    """Measures heap growth across a single call."""

    @abstractmethod
    def before(self) -> None:
        """Collect garbage and record the starting allocation level."""

    @abstractmethod
    def after(self) -> int:
        """Return bytes allocated since ``before()``, never negative."""

    def close(self) -> None:  # noqa: B027
        """Release any tracing resources. Safe to call repeatedly."""


class NullProbe(MemoryProbe):
    """Probe that measures nothing and always reports zero."""

    def before(self) -> None:
        gc.collect()

    def after(self) -> int:
        return 0


class TracemallocProbe(MemoryProbe):
    """Probe backed by :mod:`tracemalloc`.

    Starts tracing on first use if nobody else has. Tracing is stopped again by
    ``close()`` only when this probe started it.
    """

    def __init__(self) -> None:
        self._started_tracing = False
        self._baseline = 0

    def before(self) -> None:
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_tracing = True
        gc.collect()
        self._baseline, _ = tracemalloc.get_traced_memory()

    def after(self) -> int:
        current, _ = tracemalloc.get_traced_memory()
        delta = current - self._baseline
        if delta < 0:
            # GC released more than the call allocated.
            logger.debug(f"Negative memory delta {delta} clamped to 0")
            return 0
        return delta

    def close(self) -> None:
        if self._started_tracing:
            tracemalloc.stop()
            self._started_tracing = False
