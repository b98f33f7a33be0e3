# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from algobench.common.logging import setup_rich_logging


@pytest.mark.usefixtures("restore_algobench_logger")
class TestSetupRichLogging:
    def test_installs_single_rich_handler(self):
        setup_rich_logging("INFO")
        logger = setup_rich_logging("DEBUG")
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.DEBUG

    def test_child_loggers_reach_console(self):
        buffer = io.StringIO()
        setup_rich_logging("INFO", console=Console(file=buffer, width=200))
        logging.getLogger("algobench.engine.runner").info("hello from runner")
        assert "hello from runner" in buffer.getvalue()

    def test_level_is_case_insensitive(self):
        assert setup_rich_logging("warning").level == logging.WARNING
