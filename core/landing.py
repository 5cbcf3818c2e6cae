"""Touchdown classification."""

from __future__ import annotations

from core.components import FlightOutcome, LanderState, PhysicsState, Transform
from core.config import TERRAIN_PENALTY_FACTOR
from core.terrain import TERRAIN_SPAN, Terrain, world_to_index


def terrain_penalty(terrain: Terrain, x: float) -> float:
    """Speed margin lost to rough ground under x; zero off the mapped area."""
    if not TERRAIN_SPAN.contains(x):
        return 0.0
    return abs(terrain[world_to_index(x)]) * TERRAIN_PENALTY_FACTOR


def evaluate_landing(
    trans: Transform,
    phys: PhysicsState,
    limits: LanderState,
    terrain: Terrain,
) -> FlightOutcome:
    if trans.y > 0.0:
        return "flying"

    penalty = terrain_penalty(terrain, trans.x)
    vertical_ok = abs(phys.vel.y) < limits.safe_vertical_speed - penalty
    horizontal_ok = abs(phys.vel.x) < limits.safe_horizontal_speed - penalty
    return "landed" if vertical_ok and horizontal_ok else "crashed"
