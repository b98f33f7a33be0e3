# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for benchmark results."""

import orjson

from algobench.exporters.base_exporter import BaseExporter


class JsonExporter(BaseExporter):
    """Exports results as JSON.

    Output structure:
    {
        "generated_at": "2026-01-01T12:00:00",
        "num_results": 2,
        "results": [{"algorithm": "merge_sort", ...}, ...]
    }
    """

    file_extension = "json"
    media_type = "application/json"

    def _generate_content(self) -> str:
        output = {
            "generated_at": self._config.generated_at.isoformat(timespec="seconds"),
            "num_results": len(self._results),
            "results": [r.model_dump(mode="json") for r in self._results],
        }
        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8")
