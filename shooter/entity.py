"""Entities built from components, and the manager that updates them."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from .attributes import AttributeManager
from .components import Component
from .events import EntityEventManager

ComponentT = TypeVar("ComponentT", bound=Component)


class Entity:
    """A game object whose behaviour comes from its components."""

    def __init__(self) -> None:
        self._attributes = AttributeManager()
        self._event_manager = EntityEventManager()
        self._components: list[Component] = []
        self._should_destroy = False

    @property
    def attributes(self) -> AttributeManager:
        return self._attributes

    @property
    def event_manager(self) -> EntityEventManager:
        return self._event_manager

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def should_destroy(self) -> bool:
        """Whether the entity has been marked for removal."""
        return self._should_destroy

    def init_components(self) -> None:
        """Let every component look up the attributes of the others."""
        for component in self._components:
            component.fetch_attributes(self._attributes)

    def add_component(self, component_type: type[ComponentT], *args: Any, **kwargs: Any) -> ComponentT:
        """Create a component of ``component_type`` from the arguments, attach it and return it."""
        component = component_type(*args, **kwargs)
        self._components.append(component)
        component.init_attributes(self._attributes)
        component.init_entity_event_manager(self._event_manager)
        return component

    def update(self, delta_time: float) -> None:
        """Update every component in the order they were added."""
        for component in self._components:
            component.update(delta_time)

    def destroy(self) -> None:
        """Mark the entity for removal on the next manager update."""
        self._should_destroy = True

    def close(self) -> None:
        """Release what the components hold, such as sprites being drawn."""
        for component in self._components:
            close = getattr(component, "close", None)
            if callable(close):
                close()


class EntityManager:
    """Owns the live entities and updates them each frame."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def add_entity(self, entity: Entity) -> None:
        """Finish setting up ``entity`` and start updating it."""
        entity.init_components()
        self._entities.append(entity)

    def update(self, delta_time: float) -> None:
        """Update live entities and drop those marked for removal."""
        for entity in list(self._entities):
            if entity.should_destroy:
                self._entities.remove(entity)
                entity.close()
            else:
                entity.update(delta_time)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)