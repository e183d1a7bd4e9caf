"""Commands that input bindings trigger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .attributes import Direction

if TYPE_CHECKING:
    from .components import MovementComponent


class Command(ABC):
    """An action that can be run on demand."""

    @abstractmethod
    def execute(self) -> None:
        """Run the action."""


class MoveCommand(Command):
    """Requests movement in a fixed direction from a movement component."""

    def __init__(self, movement_component: MovementComponent, direction: Direction) -> None:
        self.movement_component = movement_component
        self.direction = direction

    def execute(self) -> None:
        self.movement_component.set_movement_direction(self.direction)