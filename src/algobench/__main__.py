# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Allow running AlgoBench with `python -m algobench`."""

from algobench.cli import app

if __name__ == "__main__":
    app()
