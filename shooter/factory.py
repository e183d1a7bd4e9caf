"""Builders for the game's entities and the collection that owns them."""

from __future__ import annotations

import random
import weakref
from abc import ABC, abstractmethod
from typing import Any

import pygame
from pygame.math import Vector2

from .attributes import Direction
from .camera import Camera
from .commands import MoveCommand
from .components import (
    CameraComponent,
    InputComponent,
    MovementComponent,
    RenderComponent,
    TransformComponent,
)
from .entity import Entity, EntityManager
from .input import InputHandler
from .resources import ResourceContainer
from .sprites import SpriteSortRenderer

PLAYER_TEXTURE = "player.png"
PLAYER_SCALE = 4.0
PLAYER_SPEED = 100.0
STATIC_OBJECT_SCALE = 0.6
STATIC_OBJECT_COUNT = 5
STATIC_OBJECT_MAX_X = 700
STATIC_OBJECT_MAX_Y = 500

MOVE_INPUTS = {
    "move_up": Direction.UP,
    "move_down": Direction.DOWN,
    "move_left": Direction.LEFT,
    "move_right": Direction.RIGHT,
}


class EntityFactory:
    """Assembles the player and scenery entities."""

    def __init__(
        self,
        renderer: SpriteSortRenderer,
        camera: Camera,
        textures: ResourceContainer[pygame.Surface] | None = None,
        input_handler: InputHandler | None = None,
    ) -> None:
        self.renderer = renderer
        self.camera = camera
        self._textures = textures
        self._input_handler = input_handler

    def create_player(self) -> Entity:
        """Build the player: drawn, followed by the camera and moved by input."""
        player = Entity()
        player.add_component(TransformComponent, 0.0, 0.0, PLAYER_SCALE, PLAYER_SCALE)
        player.add_component(RenderComponent, PLAYER_TEXTURE, self.renderer, self._textures)
        player.add_component(CameraComponent, self.camera)
        movement = player.add_component(MovementComponent, PLAYER_SPEED)
        controls = player.add_component(InputComponent, self._input_handler)
        for input_name, direction in MOVE_INPUTS.items():
            controls.bind_command(input_name, MoveCommand(movement, direction))
        return player

    def create_static_object(self, name: str, x: float, y: float) -> Entity:
        """Build a motionless object drawn with the texture ``name``.png at ``(x, y)``."""
        obj = Entity()
        obj.add_component(TransformComponent, x, y, STATIC_OBJECT_SCALE, STATIC_OBJECT_SCALE)
        obj.add_component(RenderComponent, f"{name}.png", self.renderer, self._textures)
        return obj


class Entities:
    """The game world: its entities, the renderer that draws them and the camera."""

    def __init__(
        self,
        textures: ResourceContainer[pygame.Surface] | None = None,
        input_handler: InputHandler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.sprite_renderer = SpriteSortRenderer()
        self.camera = Camera()
        self.entity_manager = EntityManager()
        self.factory = EntityFactory(self.sprite_renderer, self.camera, textures, input_handler)
        self._rng = rng if rng is not None else random.Random()

    def create(self) -> None:
        """Populate the world with the player and walls at random places."""
        self.entity_manager.add_entity(self.factory.create_player())
        for _ in range(STATIC_OBJECT_COUNT):
            x = self._rng.randrange(STATIC_OBJECT_MAX_X)
            y = self._rng.randrange(STATIC_OBJECT_MAX_Y)
            self.entity_manager.add_entity(self.factory.create_static_object("wall", x, y))

    def update(self, delta_time: float) -> None:
        self.entity_manager.update(delta_time)

    def render(self, window: pygame.Surface) -> None:
        """Fit the camera to ``window`` and draw every sprite through it."""
        offset = self.camera.update_view(window)
        self.sprite_renderer.render_sprites(window, offset)


class Blueprint(ABC):
    """A recipe for an entity that can be built on demand."""

    @abstractmethod
    def get_entity(self) -> Entity:
        """Build a new entity."""


class BulletBlueprint(Blueprint):
    """A recipe for a bullet fired by ``parent``."""

    def __init__(
        self,
        parent: Entity | None,
        window: Any,
        pos: Any,
        rotation: float,
        velocity: float,
        texture_name: str,
    ) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None
        self.window = window
        self.pos = Vector2(pos)
        self.rotation = rotation
        self.velocity = velocity
        self.texture_name = texture_name

    @property
    def parent(self) -> Entity | None:
        """The firing entity, or None once it no longer exists."""
        return self._parent() if self._parent is not None else None

    def get_entity(self) -> Entity:
        return Entity()