"""Numbering state used while reconstructing heading numbers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

MAX_HEADING_LEVEL = 6


@dataclass(slots=True)
class HeadingNumberTracker:
    """Per-document counters backing automatic heading numbers.

    One counter per heading level. Numbering a heading at level ``L``
    increments counter ``L`` and zeroes every deeper counter; levels never
    visited stay at zero and are left out of the rendered number.
    """

    counters: List[int] = field(default_factory=lambda: [0] * MAX_HEADING_LEVEL)

    def next_number(self, level: int) -> str:
        index = min(max(level, 1), MAX_HEADING_LEVEL) - 1
        self.counters[index] += 1
        for deeper in range(index + 1, MAX_HEADING_LEVEL):
            self.counters[deeper] = 0
        return ".".join(str(value) for value in self.counters[: index + 1] if value > 0)
