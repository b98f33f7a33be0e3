# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for AlgoBench."""


class AlgoBenchError(Exception):
    """Base class for all AlgoBench errors."""


class UnknownAlgorithmError(AlgoBenchError):
    """Raised when a benchmark names an algorithm that is not registered."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"unknown algorithm: {algorithm}")
        self.algorithm = algorithm


class DuplicateAlgorithmError(AlgoBenchError):
    """Raised when registering an algorithm name twice."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"algorithm already registered: {algorithm}")
        self.algorithm = algorithm


class VerificationError(AlgoBenchError):
    """Raised when a sort output is not a sorted permutation of its input."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"sorting verification failed for {algorithm}")
        self.algorithm = algorithm


class SweepError(AlgoBenchError):
    """Raised when a benchmark inside a sweep fails.

    The original error is chained as ``__cause__``.
    """

    def __init__(self, algorithm: str, reason: str) -> None:
        super().__init__(f"benchmark failed for {algorithm}: {reason}")
        self.algorithm = algorithm


class ExportError(AlgoBenchError):
    """Raised when results cannot be exported."""
