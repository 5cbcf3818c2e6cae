"""Radar terrain grid: generation, index mapping and sampling helpers."""

from __future__ import annotations

import math
import random
from typing import Protocol

import numpy as np

from core.config import (
    HAZARD_CHANCE_PERCENT,
    TERRAIN_MAX_X,
    TERRAIN_MIN_X,
    TERRAIN_SAMPLES,
    TERRAIN_STEP,
)
from core.maths import Range1D, lerp

TERRAIN_SPAN = Range1D(TERRAIN_MIN_X, TERRAIN_MAX_X)


def index_to_world(index: int) -> float:
    """World x of a terrain sample index."""
    return TERRAIN_MIN_X + index * TERRAIN_STEP


def world_to_index(x: float) -> int:
    """Sample index covering world x.

    Truncates toward zero, so x in (-110, -100) still maps to index 0 and
    x in [100, 110) maps to index 20. Callers decide what to do with
    indices outside the grid.
    """
    return int((x - TERRAIN_MIN_X) / TERRAIN_STEP)


def is_valid_index(index: int) -> bool:
    return 0 <= index < TERRAIN_SAMPLES


def base_profile(x: float) -> float:
    """Low-frequency surface variation before hazards are applied."""
    return math.sin(x * 0.1) * 5.0 + math.cos(x * 0.05) * 3.0


class TerrainMap:
    """Fixed-length heightmap sampled every TERRAIN_STEP metres across the play area."""

    def __init__(self, heights):
        arr = np.asarray(heights, dtype=float)
        if arr.shape != (TERRAIN_SAMPLES,):
            raise ValueError(
                f"Terrain needs exactly {TERRAIN_SAMPLES} samples, got {arr.shape}"
            )
        arr.setflags(write=False)
        self._heights = arr

    @property
    def heights(self) -> np.ndarray:
        return self._heights

    @property
    def xs(self) -> np.ndarray:
        return TERRAIN_MIN_X + np.arange(TERRAIN_SAMPLES) * TERRAIN_STEP

    def __len__(self) -> int:
        return TERRAIN_SAMPLES

    def __getitem__(self, index: int) -> float:
        if not is_valid_index(index):
            raise IndexError(f"Terrain index {index} out of range")
        return float(self._heights[index])

    def height_at(self, x: float) -> float | None:
        """Height of the sample covering x, or None off the grid."""
        index = world_to_index(x)
        if not is_valid_index(index):
            return None
        return self[index]

    def interpolated_height(self, x: float) -> float:
        """Linear interpolation between the two samples bracketing x.

        Positions beyond the grid clamp to the end samples.
        """
        pos = (x - TERRAIN_MIN_X) / TERRAIN_STEP
        i0 = max(0, min(TERRAIN_SAMPLES - 1, math.floor(pos)))
        i1 = max(0, min(TERRAIN_SAMPLES - 1, math.ceil(pos)))
        if i0 == i1:
            return self[i0]
        return lerp(self[i0], self[i1], pos - i0)


class Terrain(Protocol):
    def __getitem__(self, index: int) -> float: ...

    def interpolated_height(self, x: float) -> float: ...


def generate_terrain(rng: random.Random) -> TerrainMap:
    """Build a terrain grid with smooth rolling ground and occasional hazards.

    Roughly HAZARD_CHANCE_PERCENT of samples get a bump or crater of up to
    +-5 m on top of the base profile.
    """
    heights: list[float] = []
    for i in range(TERRAIN_SAMPLES):
        x = index_to_world(i)
        hazard = 0.0
        if rng.randrange(100) < HAZARD_CHANCE_PERCENT:
            hazard = (rng.randrange(20) - 10) * 0.5
        heights.append(base_profile(x) + hazard)
    return TerrainMap(heights)
