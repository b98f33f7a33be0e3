# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Request bodies accepted by the web API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from algobench.common.enums import Distribution


class BenchmarkRequest(BaseModel):
    """Body of ``POST /api/benchmark``.

    Accepts ``arrayType`` (camelCase) or ``array_type``.
    """

    model_config = ConfigDict(populate_by_name=True)

    algorithm: str
    array_type: Distribution = Field(default=Distribution.RANDOM, alias="arrayType")
    size: int = Field(ge=0)
    runs: int = Field(ge=1)

    @field_validator("array_type", mode="before")
    @classmethod
    def _parse_array_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Distribution.parse(value)
        return value


class BenchmarkAllRequest(BaseModel):
    """Body of ``POST /api/benchmark/all``."""

    runs: int = Field(ge=1)
