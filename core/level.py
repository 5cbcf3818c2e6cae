"""Flight setup.

A flight owns the terrain, the lander entity and the ordered per-turn
systems. It is built fresh for every launch and discarded when the next one
starts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from core.components import TurnCommand
from core.config import GameConfig
from core.ecs import World
from core.lander import Lander
from core.landing_sites import LandingSite, recommend_landing_site
from core.maths import Vector2
from core.sensor import install_recommendation
from core.systems.contact import ContactSystem
from core.systems.fuel import FuelSystem
from core.systems.integration import IntegrationSystem
from core.systems.radar import RadarDecaySystem
from core.terrain import TerrainMap, generate_terrain


@dataclass
class Flight:
    terrain: TerrainMap
    lander: Lander
    world: World
    site: LandingSite

    def resolve_turn(self, command: TurnCommand) -> None:
        """Run integration, fuel, radar decay and contact for one command."""
        self.lander.intent.command = command
        self.world.update(self.lander.time_step)

    @property
    def finished(self) -> bool:
        return self.lander.state != "flying"


def build_world(lander: Lander, terrain: TerrainMap, config: GameConfig) -> World:
    world = World()
    world.add_entity(lander)
    world.add_system(IntegrationSystem(gravity=config.gravity))
    world.add_system(FuelSystem())
    world.add_system(RadarDecaySystem())
    world.add_system(ContactSystem(terrain))
    return world


def random_start(rng: random.Random) -> tuple[Vector2, Vector2]:
    """Launch position and velocity somewhere above the mapped area."""
    pos = Vector2(float(rng.randrange(200) - 100), float(rng.randrange(500) + 100))
    vel = Vector2(float(rng.randrange(20) - 10) / 2.0, float(rng.randrange(20) - 15))
    return pos, vel


def create_flight(
    config: GameConfig,
    rng: random.Random,
    *,
    start_pos: Vector2 | None = None,
    start_vel: Vector2 | None = None,
) -> Flight:
    pos, vel = random_start(rng)
    lander = Lander(
        start_pos=start_pos if start_pos is not None else pos,
        start_vel=start_vel if start_vel is not None else vel,
        fuel=config.initial_fuel,
        engine_force=config.engine_force,
    )
    terrain = generate_terrain(rng)
    site = recommend_landing_site(terrain)
    install_recommendation(lander.radar, site)
    return Flight(
        terrain=terrain,
        lander=lander,
        world=build_world(lander, terrain, config),
        site=site,
    )


__all__ = ["Flight", "build_world", "create_flight", "random_start"]
