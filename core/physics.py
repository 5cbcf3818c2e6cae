"""Discrete turn integrator for the lander's point-mass motion."""

from __future__ import annotations

from core.components import Engine, PhysicsState, Transform, TurnCommand
from core.config import LATERAL_THRUST_RATIO
from core.maths import Vector2


def thrust_acceleration(engine: Engine, command: TurnCommand) -> Vector2:
    """Engine acceleration produced by a command.

    A left burn fires the left-side nozzle: it lifts the lander and pushes it
    toward +x. A right burn mirrors that. Drift, or any command while the
    engines are off, produces nothing.
    """
    if command not in ("burn_left", "burn_right", "drift"):
        raise ValueError(f"Unknown turn command: {command!r}")
    if not engine.on or command == "drift":
        return Vector2(0.0, 0.0)
    lateral = engine.force * LATERAL_THRUST_RATIO
    if command == "burn_left":
        return Vector2(lateral, engine.force)
    return Vector2(-lateral, engine.force)


def integrate_turn(
    trans: Transform,
    phys: PhysicsState,
    engine: Engine,
    command: TurnCommand,
    gravity: float,
    dt: float,
) -> None:
    """Advance velocity and position by one turn. Fuel is not touched here."""
    phys.prev_vel = Vector2(phys.vel)

    phys.vel.y -= gravity * dt
    phys.vel += thrust_acceleration(engine, command) * dt

    trans.pos += phys.vel * dt
    if trans.pos.y < 0.0:
        trans.pos.y = 0.0
