from __future__ import annotations

from core.components import ControlIntent, Engine, PhysicsState, Transform
from core.ecs import System
from core.physics import integrate_turn


class IntegrationSystem(System):
    """Apply gravity and the turn's burn command, then move the lander."""

    def __init__(self, gravity: float):
        super().__init__()
        self.gravity = gravity

    def update(self, dt: float) -> None:
        if not self.world:
            return

        for entity in self.world.get_entities_with(Transform, PhysicsState, Engine, ControlIntent):
            integrate_turn(
                entity.require_component(Transform),
                entity.require_component(PhysicsState),
                entity.require_component(Engine),
                entity.require_component(ControlIntent).command,
                self.gravity,
                dt,
            )
