"""Math utilities for 2D vectors, ranges, and grid rounding."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from pygame.math import Vector2 as _Vector2  # noqa: E402

# Export Vector2 alias
Vector2 = _Vector2


@dataclass(frozen=True)
class Range1D:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def fraction(self, x: float) -> float:
        """Position of x within the range, 0 at min and 1 at max (unclamped)."""
        return (x - self.min) / self.span

    def at_fraction(self, t: float) -> float:
        return self.min + t * self.span


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding, which shifts grid cells at
    exact .5 boundaries.
    """
    if value >= 0.0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))
