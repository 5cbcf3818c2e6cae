from dataclasses import dataclass, field
from typing import Literal

from core.config import (
    ENGINE_FORCE,
    INITIAL_FUEL,
    SAFE_HORIZONTAL_SPEED,
    SAFE_VERTICAL_SPEED,
    TURN_DURATION,
)
from core.maths import Vector2

TurnCommand = Literal["burn_left", "burn_right", "drift"]
FlightOutcome = Literal["flying", "landed", "crashed"]


@dataclass
class Transform:
    """Component representing horizontal position (x) and altitude (y)."""
    pos: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value


@dataclass
class PhysicsState:
    """Component representing velocity and the previous turn's snapshot."""
    vel: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    prev_vel: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    time_step: float = TURN_DURATION

    @property
    def delta_vel(self) -> Vector2:
        return self.vel - self.prev_vel


@dataclass
class FuelTank:
    """Component representing fuel storage, counted in whole burns."""
    fuel: int = INITIAL_FUEL


@dataclass
class Engine:
    """Component representing the main engine."""
    on: bool = False
    force: float = ENGINE_FORCE  # Acceleration in m/s^2 while burning


@dataclass
class Radar:
    """Component representing the landing radar and its precomputed recommendation."""
    active: bool = False
    turns_remaining: int = 0
    recommended_x: float = 0.0
    recommended_score: float = 0.0
    signal_lost: bool = False  # Set on the turn the radar window expires


@dataclass
class LanderState:
    """Component representing the lander's flight/contact state."""
    state: FlightOutcome = "flying"
    safe_vertical_speed: float = SAFE_VERTICAL_SPEED
    safe_horizontal_speed: float = SAFE_HORIZONTAL_SPEED


@dataclass
class ControlIntent:
    """Per-turn command selected by the game loop."""
    command: TurnCommand = "drift"
