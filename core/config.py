"""Centralized configuration constants and per-session game settings."""

from __future__ import annotations

from dataclasses import dataclass

# Physics defaults (moon gravity, modest descent engine)
GRAVITY = 1.6
ENGINE_FORCE = 3.0
INITIAL_FUEL = 50
TURN_DURATION = 1.0

# Fraction of engine force that a directional burn applies sideways
LATERAL_THRUST_RATIO = 0.3

# Landing limits (m/s)
SAFE_VERTICAL_SPEED = 2.0
SAFE_HORIZONTAL_SPEED = 1.5
TERRAIN_PENALTY_FACTOR = 0.2

# Terrain grid
TERRAIN_MIN_X = -100.0
TERRAIN_MAX_X = 100.0
TERRAIN_STEP = 10.0
TERRAIN_SAMPLES = 21
HAZARD_CHANCE_PERCENT = 15

# Radar
RADAR_WINDOW_TURNS = 3
RADAR_MANEUVER_DISTANCE = 50.0
RADAR_APPROACH_DISTANCE = 10.0

# Radar viewport
VIEW_COLUMNS = 61
VIEW_ROWS = 16
LANDING_MODE_ALTITUDE = 60.0
LANDING_VIEW_HEIGHT = 40.0
LANDING_VIEW_FLOOR = -15.0
APPROACH_VIEW_HEIGHT = 150.0
APPROACH_VIEW_HEADROOM = 30.0

# Results
RESULTS_PATH = "lander_results.txt"


@dataclass
class GameConfig:
    """Settings chosen at startup and editable between flights."""

    gravity: float = GRAVITY
    engine_force: float = ENGINE_FORCE
    initial_fuel: int = INITIAL_FUEL
    display_delta_v: bool = False

    @property
    def display_mode(self) -> str:
        return "Delta V" if self.display_delta_v else "m/s"
