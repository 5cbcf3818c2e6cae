"""Landing radar: activation, readouts and advisories."""

from __future__ import annotations

from dataclasses import dataclass

from core.components import FuelTank, Radar, Transform
from core.config import (
    RADAR_APPROACH_DISTANCE,
    RADAR_MANEUVER_DISTANCE,
    RADAR_WINDOW_TURNS,
)
from core.landing_sites import LandingSite


@dataclass(frozen=True)
class RadarReading:
    """Snapshot of what the radar shows for one lander position."""
    recommended_x: float
    recommended_score: float
    distance: float
    turns_remaining: int
    advisory: str | None


def radar_advisory(distance: float) -> str | None:
    if distance > RADAR_MANEUVER_DISTANCE:
        return "Recommend horizontal maneuvering"
    if distance < RADAR_APPROACH_DISTANCE:
        return "On approach to safe zone"
    return None


def install_recommendation(radar: Radar, site: LandingSite) -> None:
    """Reset the radar for a new flight and load the precomputed landing zone."""
    radar.active = False
    radar.turns_remaining = 0
    radar.signal_lost = False
    radar.recommended_x = site.x
    radar.recommended_score = site.score


def activate_radar(radar: Radar, tank: FuelTank) -> bool:
    """Switch the radar on for a fresh window, paying one unit of fuel.

    Returns False, leaving everything untouched, when the tank is empty.
    """
    if tank.fuel <= 0:
        return False
    radar.active = True
    radar.turns_remaining = RADAR_WINDOW_TURNS
    radar.signal_lost = False
    tank.fuel -= 1
    return True


def decay_radar(radar: Radar) -> None:
    """Burn one turn of the radar window; deactivates at zero."""
    radar.signal_lost = False
    if not radar.active or radar.turns_remaining <= 0:
        return
    radar.turns_remaining -= 1
    if radar.turns_remaining <= 0:
        radar.active = False
        radar.signal_lost = True


def read_radar(radar: Radar, trans: Transform) -> RadarReading | None:
    if not radar.active:
        return None
    distance = abs(trans.x - radar.recommended_x)
    return RadarReading(
        recommended_x=radar.recommended_x,
        recommended_score=radar.recommended_score,
        distance=distance,
        turns_remaining=radar.turns_remaining,
        advisory=radar_advisory(distance),
    )
