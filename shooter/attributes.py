"""Per-entity data blocks that components share through an attribute manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, TypeVar

from pygame.math import Vector2


class Attribute:
    """Base class for every piece of data an entity's components share."""


AttributeT = TypeVar("AttributeT", bound=Attribute)


@dataclass
class AnimationAttribute(Attribute):
    """Which sprite-sheet frame to show and whether to cycle through frames."""

    row: int = 5
    column: int = 2
    is_animating: bool = True
    interval: float = 0.8


class Direction(Enum):
    """A direction an entity can be asked to move in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class DirectionAttribute(Attribute):
    """The set of directions an entity has been asked to move in this frame."""

    def __init__(self) -> None:
        self._active: set[Direction] = set()

    def set_direction(self, direction: Direction, value: bool) -> None:
        """Mark ``direction`` as requested or not."""
        if value:
            self._active.add(direction)
        else:
            self._active.discard(direction)

    def get_direction(self, direction: Direction) -> bool:
        """Return whether ``direction`` is currently requested."""
        return direction in self._active

    def __repr__(self) -> str:
        names = sorted(d.name for d in self._active)
        return f"{type(self).__name__}({names})"


@dataclass
class SpriteAttribute(Attribute):
    """The drawable sprite belonging to an entity."""

    sprite: Any = None


def _as_vector(value: Any) -> Vector2:
    return value if isinstance(value, Vector2) else Vector2(value)


@dataclass
class TransformAttribute(Attribute):
    """Position, rotation and scale of an entity in world space."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position)
        self.scale = _as_vector(self.scale)


@dataclass
class VelocityAttribute(Attribute):
    """Velocity of an entity in world units per second."""

    velocity: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        self.velocity = _as_vector(self.velocity)


def _check_attribute_type(attribute_type: type) -> None:
    if not (isinstance(attribute_type, type) and issubclass(attribute_type, Attribute)):
        raise TypeError(f"{attribute_type!r} is not an Attribute type")


class AttributeManager:
    """Holds at most one attribute of each type for a single entity."""

    def __init__(self) -> None:
        self._attributes: dict[type[Attribute], Attribute] = {}

    def add_attribute(self, attribute_type: type[AttributeT], *args: Any, **kwargs: Any) -> AttributeT:
        """Create an attribute of ``attribute_type`` from the arguments and store it."""
        _check_attribute_type(attribute_type)
        if attribute_type in self._attributes:
            raise ValueError(f"attribute {attribute_type.__name__} is already present")
        attribute = attribute_type(*args, **kwargs)
        self._attributes[attribute_type] = attribute
        return attribute

    def has_attribute(self, attribute_type: type[Attribute]) -> bool:
        """Return whether an attribute of exactly ``attribute_type`` is stored."""
        _check_attribute_type(attribute_type)
        return attribute_type in self._attributes

    def get_attribute(self, attribute_type: type[AttributeT]) -> AttributeT:
        """Return the stored attribute of ``attribute_type``."""
        _check_attribute_type(attribute_type)
        try:
            return self._attributes[attribute_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"no {attribute_type.__name__} attribute") from None

    def __contains__(self, attribute_type: object) -> bool:
        return attribute_type in self._attributes

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes.values())

    def __len__(self) -> int:
        return len(self._attributes)