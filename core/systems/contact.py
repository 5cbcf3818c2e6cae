from core.components import LanderState, PhysicsState, Transform
from core.ecs import System
from core.landing import evaluate_landing


class ContactSystem(System):
    """Post-physics: classify touchdown as a landing or a crash."""

    def __init__(self, terrain):
        super().__init__()
        self.terrain = terrain

    def update(self, dt: float) -> None:
        _ = dt
        if not self.world:
            return

        for entity in self.world.get_entities_with(LanderState, PhysicsState, Transform):
            ls = entity.require_component(LanderState)
            if ls.state != "flying":
                continue
            ls.state = evaluate_landing(
                entity.require_component(Transform),
                entity.require_component(PhysicsState),
                ls,
                self.terrain,
            )
