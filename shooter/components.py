"""Components that give an entity its behaviour by working on shared attributes."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

import pygame

from .animator import AnimationInfo, Animator
from .attributes import (
    AnimationAttribute,
    AttributeManager,
    Direction,
    DirectionAttribute,
    SpriteAttribute,
    TransformAttribute,
    VelocityAttribute,
)
from .behaviour import Node
from .camera import Camera
from .events import EntityEventManager
from .input import InputHandler
from .resources import ResourceContainer, ResourceManager
from .sprites import Sprite, SpriteSortRenderer

if TYPE_CHECKING:
    from .commands import Command


class Component(ABC):
    """A piece of entity behaviour, updated once per frame."""

    def init_attributes(self, attributes: AttributeManager) -> None:
        """Add the attributes this component owns."""

    def init_entity_event_manager(self, event_manager: EntityEventManager) -> None:
        """Receive the entity's event manager."""

    def fetch_attributes(self, attributes: AttributeManager) -> None:
        """Look up attributes owned by other components."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds."""


def _require(value, name: str):
    if value is None:
        raise RuntimeError(f"{name} is not initialised; call init_attributes first")
    return value


class AnimationComponent(Component):
    """Selects the sprite-sheet frame shown by the entity's sprite."""

    def __init__(self, info: AnimationInfo, clock: Callable[[], float] = time.monotonic) -> None:
        self._animator = Animator(info, clock)
        self._animation: AnimationAttribute | None = None
        self._sprite: SpriteAttribute | None = None

    @property
    def animation(self) -> AnimationAttribute | None:
        return self._animation

    def init_attributes(self, attributes: AttributeManager) -> None:
        self._animation = attributes.add_attribute(AnimationAttribute)

    def fetch_attributes(self, attributes: AttributeManager) -> None:
        if attributes.has_attribute(SpriteAttribute):
            self._sprite = attributes.get_attribute(SpriteAttribute)

    def update(self, delta_time: float) -> None:
        if self._sprite is None:
            return
        animation = _require(self._animation, "animation attribute")
        if animation.is_animating:
            frame = self._animator.animate(animation.column, animation.interval)
        else:
            frame = self._animator.get_frame(animation.row, animation.column)
        self._sprite.sprite.texture_rect = frame


class BehaviourTreeComponent(Component):
    """Processes a behaviour tree once per frame."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def update(self, delta_time: float) -> None:
        self.root.process()


class CameraComponent(Component):
    """Keeps a camera centred on the entity."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self._transform: TransformAttribute | None = None

    def fetch_attributes(self, attributes: AttributeManager) -> None:
        if attributes.has_attribute(TransformAttribute):
            self._transform = attributes.get_attribute(TransformAttribute)

    def update(self, delta_time: float) -> None:
        if self._transform is not None:
            self.camera.set_centre(self._transform.position)


class InputComponent(Component):
    """Runs the commands whose bound inputs are held."""

    def __init__(self, input_handler: InputHandler | None = None) -> None:
        self._input_handler = input_handler
        self._commands: dict[str, Command] = {}

    @property
    def input_handler(self) -> InputHandler:
        return self._input_handler if self._input_handler is not None else InputHandler.get_instance()

    def bind_command(self, input_name: str, command: Command) -> None:
        """Run ``command`` while ``input_name`` is held; an already bound name is kept."""
        self._commands.setdefault(input_name, command)

    def update(self, delta_time: float) -> None:
        handler = self.input_handler
        for input_name, command in self._commands.items():
            if handler.is_button_down(input_name):
                command.execute()


class MovementComponent(Component):
    """Turns requested directions into a velocity at a fixed speed."""

    def __init__(self, speed: float) -> None:
        self._speed = speed
        self._velocity: VelocityAttribute | None = None
        self._directions: DirectionAttribute | None = None

    @property
    def speed(self) -> float:
        return self._speed

    def init_attributes(self, attributes: AttributeManager) -> None:
        self._velocity = attributes.add_attribute(VelocityAttribute)
        self._directions = attributes.add_attribute(DirectionAttribute)

    def update(self, delta_time: float) -> None:
        velocity = _require(self._velocity, "velocity attribute").velocity
        directions = _require(self._directions, "direction attribute")
        velocity.x = 0.0
        velocity.y = 0.0
        if directions.get_direction(Direction.UP):
            velocity.y = -self._speed
        if directions.get_direction(Direction.DOWN):
            velocity.y = self._speed
        if directions.get_direction(Direction.LEFT):
            velocity.x = -self._speed
        if directions.get_direction(Direction.RIGHT):
            velocity.x = self._speed
        for direction in Direction:
            directions.set_direction(direction, False)

    def set_movement_direction(self, direction: Direction) -> None:
        """Request movement in ``direction`` for the next update."""
        _require(self._directions, "direction attribute").set_direction(direction, True)


class RenderComponent(Component):
    """Gives the entity a textured sprite drawn by a sorting renderer."""

    def __init__(
        self,
        texture_path: str,
        renderer: SpriteSortRenderer,
        textures: ResourceContainer[pygame.Surface] | None = None,
    ) -> None:
        self._renderer = renderer
        container = textures if textures is not None else ResourceManager.get_instance().texture_container
        self._texture = container.acquire(texture_path)
        self._sprite: SpriteAttribute | None = None
        self._transform: TransformAttribute | None = None

    @property
    def texture(self) -> pygame.Surface:
        return self._texture

    def init_attributes(self, attributes: AttributeManager) -> None:
        self._sprite = attributes.add_attribute(SpriteAttribute, Sprite(self._texture))
        self._renderer.add_sprite(self._sprite.sprite)

    def fetch_attributes(self, attributes: AttributeManager) -> None:
        if attributes.has_attribute(TransformAttribute):
            self._transform = attributes.get_attribute(TransformAttribute)

    def update(self, delta_time: float) -> None:
        if self._transform is None:
            return
        sprite = _require(self._sprite, "sprite attribute").sprite
        sprite.position = self._transform.position
        sprite.scale = self._transform.scale

    def close(self) -> None:
        """Stop drawing the sprite."""
        if self._sprite is not None:
            self._renderer.remove_sprite(self._sprite.sprite)
            self._sprite = None

    def __enter__(self) -> RenderComponent:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TransformComponent(Component):
    """Places the entity in the world and moves it by its velocity."""

    def __init__(self, x: float, y: float, scale_x: float = 1.0, scale_y: float = 1.0) -> None:
        self._original_position = pygame.math.Vector2(x, y)
        self._scale = pygame.math.Vector2(scale_x, scale_y)
        self._transform: TransformAttribute | None = None
        self._velocity: VelocityAttribute | None = None

    def init_attributes(self, attributes: AttributeManager) -> None:
        self._transform = attributes.add_attribute(
            TransformAttribute,
            position=pygame.math.Vector2(self._original_position),
            scale=pygame.math.Vector2(self._scale),
        )

    def fetch_attributes(self, attributes: AttributeManager) -> None:
        if attributes.has_attribute(VelocityAttribute):
            self._velocity = attributes.get_attribute(VelocityAttribute)

    def update(self, delta_time: float) -> None:
        if self._velocity is None:
            return
        position = _require(self._transform, "transform attribute").position
        position.x += self._velocity.velocity.x * delta_time
        position.y += self._velocity.velocity.y * delta_time