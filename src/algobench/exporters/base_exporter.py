# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for file exporters."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from algobench.common.exceptions import ExportError
from algobench.exporters.exporter_config import ExporterConfig

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class BaseExporter(ABC):
    """Renders benchmark results to a single text file.

    Subclasses provide the file extension, the media type and the content.
    Exporting an empty result list is an error.
    """

    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    def __init__(self, config: ExporterConfig) -> None:
        if not config.results:
            raise ExportError("No results to export")
        self._config = config
        self._results = config.results

    def get_file_name(self) -> str:
        """Return the default file name, e.g. "results_20260101_120000.csv"."""
        timestamp = self._config.generated_at.strftime(TIMESTAMP_FORMAT)
        return f"{self._config.file_prefix}_{timestamp}.{self.file_extension}"

    def generate_content(self) -> str:
        """Render the export without touching the file system."""
        return self._generate_content()

    @abstractmethod
    def _generate_content(self) -> str:
        """Render the results in this exporter's format."""

    def export(self, path: Path | str | None = None) -> Path:
        """Write the export to disk.

        Args:
            path: Destination file. Defaults to output_dir / get_file_name().

        Returns:
            Path of the written file

        Raises:
            ExportError: If the file cannot be written
        """
        target = (
            Path(path) if path else self._config.output_dir / self.get_file_name()
        )
        content = self._generate_content()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            raise ExportError(f"Failed to write {target}: {e}") from e

        logger.info(f"Exported {len(self._results)} results to {target}")
        return target
