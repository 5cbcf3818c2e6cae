from __future__ import annotations

from dataclasses import dataclass

from core.config import TERRAIN_SAMPLES
from core.terrain import Terrain, index_to_world, is_valid_index, world_to_index


@dataclass(frozen=True)
class LandingSite:
    x: float
    score: float


def landing_safety(terrain: Terrain, x: float) -> float:
    """Score 0..100 for touching down at x; flat, low ground scores highest.

    Elevation costs 10 points per metre of |height|. Interior samples also
    lose 5 points per metre of rise/fall to each neighbour. Off-grid
    positions score 0.
    """
    index = world_to_index(x)
    if not is_valid_index(index):
        return 0.0

    height = terrain[index]
    safety = 100.0 - abs(height) * 10.0
    if 0 < index < TERRAIN_SAMPLES - 1:
        slope_left = abs(height - terrain[index - 1])
        slope_right = abs(terrain[index + 1] - height)
        safety -= (slope_left + slope_right) * 5.0
    return max(0.0, safety)


def interior_sites(terrain: Terrain) -> list[LandingSite]:
    return [
        LandingSite(x=index_to_world(i), score=landing_safety(terrain, index_to_world(i)))
        for i in range(1, TERRAIN_SAMPLES - 1)
    ]


def recommend_landing_site(terrain: Terrain) -> LandingSite:
    """Best interior landing site; the leftmost wins ties."""
    best = LandingSite(x=0.0, score=-1.0)
    for site in interior_sites(terrain):
        if site.score > best.score:
            best = site
    return best
