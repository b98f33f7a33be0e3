# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters for benchmark results."""

from algobench.exporters.base_exporter import BaseExporter
from algobench.exporters.console_exporter import ConsoleExporter
from algobench.exporters.csv_exporter import CSV_HEADER, CsvExporter
from algobench.exporters.exporter_config import ExporterConfig
from algobench.exporters.json_exporter import JsonExporter
from algobench.exporters.markdown_exporter import MarkdownExporter

__all__ = [
    "BaseExporter",
    "CSV_HEADER",
    "ConsoleExporter",
    "CsvExporter",
    "ExporterConfig",
    "JsonExporter",
    "MarkdownExporter",
]
