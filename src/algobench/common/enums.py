# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Enumerations shared across AlgoBench."""

from enum import StrEnum


class Distribution(StrEnum):
    """Shape of a generated input array."""

    RANDOM = "random"
    SORTED = "sorted"
    REVERSE = "reverse"

    @property
    def display_name(self) -> str:
        """Human-readable name used in results and exports."""
        return _DISTRIBUTION_DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: "str | Distribution") -> "Distribution":
        """Parse a user-supplied distribution name.

        Accepts the enum value, the display name, or a few common aliases
        ("ascending", "descending", "reverse_sorted"). Matching is case-insensitive.

        Raises:
            ValueError: If the name does not match any distribution
        """
        if isinstance(value, Distribution):
            return value
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return _DISTRIBUTION_ALIASES[key]
        except KeyError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(
                f"Invalid array type: '{value}'. Valid array types: {valid}"
            ) from None


class AlgorithmKind(StrEnum):
    """Capability tag of a registered algorithm."""

    SORT = "sort"
    SEARCH = "search"


_DISTRIBUTION_DISPLAY_NAMES = {
    Distribution.RANDOM: "Random",
    Distribution.SORTED: "Sorted",
    Distribution.REVERSE: "Reverse Sorted",
}

_DISTRIBUTION_ALIASES = {
    "random": Distribution.RANDOM,
    "uniform": Distribution.RANDOM,
    "uniform_random": Distribution.RANDOM,
    "sorted": Distribution.SORTED,
    "ascending": Distribution.SORTED,
    "reverse": Distribution.REVERSE,
    "reverse_sorted": Distribution.REVERSE,
    "descending": Distribution.REVERSE,
}
