# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup for AlgoBench entry points."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from algobench.common.environment import Environment

_ROOT_LOGGER_NAME = "algobench"


def setup_rich_logging(
    level: str | int | None = None, console: Console | None = None
) -> logging.Logger:
    """Install a RichHandler on the ``algobench`` logger.

    Safe to call more than once: any handler installed by an earlier call is
    replaced, so the level and console always reflect the latest call.

    Args:
        level: Log level name or number. Defaults to ``ALGOBENCH_LOG_LEVEL``.
        console: Console to log to. Defaults to stderr.

    Returns:
        The configured ``algobench`` logger.
    """
    if level is None:
        level = Environment.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
