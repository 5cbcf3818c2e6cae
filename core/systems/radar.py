from __future__ import annotations

from core.components import Radar
from core.ecs import System
from core.sensor import decay_radar


class RadarDecaySystem(System):
    """Count down the radar validity window once per resolved turn."""

    def update(self, dt: float) -> None:
        _ = dt
        if not self.world:
            return

        for entity in self.world.get_entities_with(Radar):
            decay_radar(entity.require_component(Radar))
