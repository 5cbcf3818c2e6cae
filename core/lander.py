"""Lander entity: the mutable flight state shared by every turn system."""

from core.components import (
    ControlIntent,
    Engine,
    FuelTank,
    LanderState,
    PhysicsState,
    Radar,
    Transform,
)
from core.config import ENGINE_FORCE, INITIAL_FUEL
from core.ecs import Entity
from core.maths import Vector2


class Lander(Entity):
    """Lunar lander entity composed of functional components."""

    def __init__(
        self,
        start_pos: Vector2 | None = None,
        start_vel: Vector2 | None = None,
        fuel: int = INITIAL_FUEL,
        engine_force: float = ENGINE_FORCE,
    ):
        super().__init__(uid="lander")

        self.trans = Transform(pos=Vector2(start_pos) if start_pos is not None else Vector2(0.0, 0.0))
        self.add_component(self.trans)

        vel = Vector2(start_vel) if start_vel is not None else Vector2(0.0, 0.0)
        self.physics = PhysicsState(vel=vel, prev_vel=Vector2(vel))
        self.add_component(self.physics)

        self.tank = FuelTank(fuel=int(fuel))
        self.add_component(self.tank)

        self.engine = Engine(on=False, force=float(engine_force))
        self.add_component(self.engine)

        self.radar = Radar()
        self.add_component(self.radar)

        self.lander_state = LanderState()
        self.add_component(self.lander_state)

        self.intent = ControlIntent()
        self.add_component(self.intent)

    # -------------------------------------------------------------------------
    # Property Facades (Forwarding to Components)
    # -------------------------------------------------------------------------

    # Transform
    @property
    def pos(self) -> Vector2: return self.trans.pos

    @property
    def x(self) -> float: return self.trans.x
    @x.setter
    def x(self, v: float): self.trans.x = v

    @property
    def altitude(self) -> float: return self.trans.y
    @altitude.setter
    def altitude(self, v: float): self.trans.y = v

    # Physics
    @property
    def vel(self) -> Vector2: return self.physics.vel

    @property
    def vx(self) -> float: return self.physics.vel.x
    @vx.setter
    def vx(self, v: float): self.physics.vel.x = v

    @property
    def vy(self) -> float: return self.physics.vel.y
    @vy.setter
    def vy(self, v: float): self.physics.vel.y = v

    @property
    def time_step(self) -> float: return self.physics.time_step

    # Fuel/Engine
    @property
    def fuel(self) -> int: return self.tank.fuel
    @fuel.setter
    def fuel(self, v: int): self.tank.fuel = v

    @property
    def engines_on(self) -> bool: return self.engine.on
    @engines_on.setter
    def engines_on(self, v: bool): self.engine.on = v

    # LanderState
    @property
    def state(self) -> str: return self.lander_state.state
    @state.setter
    def state(self, v: str): self.lander_state.state = v
