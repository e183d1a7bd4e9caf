"""Sprites and a renderer that draws them back to front by their lower edge."""

from __future__ import annotations

from typing import Any

import pygame
from pygame.math import Vector2


class Sprite:
    """A textured rectangle with a position and a scale."""

    def __init__(self, texture: pygame.Surface | None = None, position: Any = (0.0, 0.0), scale: Any = (1.0, 1.0)) -> None:
        self.position = position
        self.scale = scale
        self.texture: pygame.Surface | None = None
        self._texture_rect = pygame.Rect(0, 0, 0, 0)
        if texture is not None:
            self.set_texture(texture)

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Any) -> None:
        self._position = Vector2(value)

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, value: Any) -> None:
        self._scale = Vector2(value)

    @property
    def texture_rect(self) -> pygame.Rect:
        """The part of the texture that is shown."""
        return self._texture_rect

    @texture_rect.setter
    def texture_rect(self, value: Any) -> None:
        self._texture_rect = pygame.Rect(value)

    def set_texture(self, texture: pygame.Surface, reset_rect: bool = False) -> None:
        """Use ``texture``, showing all of it if no part was chosen yet or ``reset_rect`` is set."""
        self.texture = texture
        if reset_rect or self._texture_rect.size == (0, 0):
            self._texture_rect = pygame.Rect((0, 0), texture.get_size())

    @property
    def global_bounds(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the sprite in world space."""
        width = self._texture_rect.width * self._scale.x
        height = self._texture_rect.height * self._scale.y
        left = self._position.x + min(0.0, width)
        top = self._position.y + min(0.0, height)
        return left, top, abs(width), abs(height)

    def draw(self, target: pygame.Surface, offset: Any = (0.0, 0.0)) -> None:
        """Blit the sprite onto ``target`` shifted by ``-offset``."""
        if self.texture is None:
            return
        area = self._texture_rect.clip(self.texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        left, top, width, height = self.global_bounds
        size = (round(width), round(height))
        if size[0] == 0 or size[1] == 0:
            return
        image = self.texture.subsurface(area)
        if size != image.get_size():
            image = pygame.transform.scale(image, size)
        if self._scale.x < 0 or self._scale.y < 0:
            image = pygame.transform.flip(image, self._scale.x < 0, self._scale.y < 0)
        shift = Vector2(offset)
        target.blit(image, (round(left - shift.x), round(top - shift.y)))


def _depth(sprite: Sprite) -> float:
    return sprite.position.y + sprite.global_bounds[3]


class SpriteSortRenderer:
    """Draws sprites ordered by the y-coordinate of their lower edge."""

    def __init__(self) -> None:
        self._sprites: list[Sprite] = []

    @property
    def sprites(self) -> tuple[Sprite, ...]:
        return tuple(self._sprites)

    def add_sprite(self, sprite: Sprite) -> None:
        """Start drawing ``sprite``."""
        self._sprites.append(sprite)

    def remove_sprite(self, sprite: Sprite) -> None:
        """Stop drawing ``sprite``."""
        for index, candidate in enumerate(self._sprites):
            if candidate is sprite:
                del self._sprites[index]
                return
        raise ValueError("sprite is not being rendered")

    def sort(self) -> None:
        """Order sprites so that those lower on screen come later; ties keep their order."""
        self._sprites.sort(key=_depth)

    def render_sprites(self, window: pygame.Surface, offset: Any = (0.0, 0.0)) -> None:
        """Sort the sprites and draw them onto ``window``."""
        self.sort()
        for sprite in self._sprites:
            sprite.draw(window, offset)

    def __len__(self) -> int:
        return len(self._sprites)