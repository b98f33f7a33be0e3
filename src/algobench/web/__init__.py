# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON web API over the benchmark engine."""

from algobench.web.http import BadRequest, HttpRequest, HttpResponse
from algobench.web.models import BenchmarkAllRequest, BenchmarkRequest
from algobench.web.server import BenchmarkWebServer, run_server

__all__ = [
    "BadRequest",
    "BenchmarkAllRequest",
    "BenchmarkRequest",
    "BenchmarkWebServer",
    "HttpRequest",
    "HttpResponse",
    "run_server",
]
