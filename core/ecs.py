from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

T = TypeVar("T")


class Entity:
    """A container for components with a unique ID."""

    def __init__(self, uid: str | None = None):
        self.uid = uid or str(uuid.uuid4())
        self.components: dict[Type, Any] = {}

    def add_component(self, component: Any) -> None:
        self.components[type(component)] = component

    def get_component(self, component_type: Type[T]) -> T | None:
        return self.components.get(component_type)

    def has_component(self, component_type: Type) -> bool:
        return component_type in self.components

    def require_component(self, component_type: Type[T]) -> T:
        comp = self.get_component(component_type)
        if comp is None:
            raise RuntimeError(f"Entity {self.uid} missing component {component_type.__name__}")
        return comp


class System(ABC):
    """Base class for per-turn systems operating on entities with specific components."""

    def __init__(self):
        self.world: World | None = None

    @abstractmethod
    def update(self, dt: float):
        """Advance the system by one turn of length dt."""


class World:
    """Owns the entities of one flight and the systems run each turn, in order."""

    def __init__(self):
        self.entities: list[Entity] = []
        self.systems: list[System] = []

    def add_entity(self, entity: Entity) -> None:
        if entity not in self.entities:
            self.entities.append(entity)

    def add_system(self, system: System) -> None:
        system.world = self
        self.systems.append(system)

    def get_entities_with(self, *component_types: Type) -> list[Entity]:
        """Return all entities that have ALL of the specified component types."""
        return [
            entity
            for entity in self.entities
            if all(entity.has_component(ct) for ct in component_types)
        ]

    def update(self, dt: float) -> None:
        for system in self.systems:
            system.update(dt)
