from __future__ import annotations

from core.components import ControlIntent, FuelTank
from core.ecs import System


class FuelSystem(System):
    """Charge one unit of fuel for every burn turn; drifting is free."""

    def update(self, dt: float) -> None:
        _ = dt
        if not self.world:
            return

        for entity in self.world.get_entities_with(FuelTank, ControlIntent):
            tank = entity.require_component(FuelTank)
            intent = entity.require_component(ControlIntent)
            if intent.command != "drift":
                tank.fuel = max(0, tank.fuel - 1)
