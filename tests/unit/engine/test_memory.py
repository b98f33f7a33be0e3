# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import tracemalloc
from unittest.mock import patch

from algobench.engine.memory import NullProbe, TracemallocProbe


class TestNullProbe:
    def test_always_zero(self):
        probe = NullProbe()
        probe.before()
        _ = [0] * 10_000
        assert probe.after() == 0
        probe.close()


class TestTracemallocProbe:
    def test_measures_allocation(self):
        probe = TracemallocProbe()
        try:
            probe.before()
            data = [object() for _ in range(10_000)]
            used = probe.after()
        finally:
            probe.close()
        assert used > 0
        assert len(data) == 10_000

    def test_negative_delta_clamped_to_zero(self):
        probe = TracemallocProbe()
        try:
            probe.before()
            with patch(
                "algobench.engine.memory.tracemalloc.get_traced_memory",
                return_value=(0, 0),
            ):
                probe._baseline = 4096
                assert probe.after() == 0
        finally:
            probe.close()

    def test_stops_tracing_it_started(self):
        if tracemalloc.is_tracing():
            tracemalloc.stop()
        probe = TracemallocProbe()
        probe.before()
        assert tracemalloc.is_tracing()
        probe.close()
        assert not tracemalloc.is_tracing()

    def test_leaves_existing_tracing_running(self):
        tracemalloc.start()
        try:
            probe = TracemallocProbe()
            probe.before()
            probe.after()
            probe.close()
            assert tracemalloc.is_tracing()
        finally:
            tracemalloc.stop()

    def test_close_is_idempotent(self):
        probe = TracemallocProbe()
        probe.before()
        probe.close()
        probe.close()
