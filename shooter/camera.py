"""A view that follows a point in the world."""

from __future__ import annotations

from typing import Any

from pygame.math import Vector2

_DEFAULT_SIZE = (1000.0, 1000.0)


class Camera:
    """A rectangular view of the world given by its centre and size."""

    def __init__(self, centre: Any = None, size: Any = _DEFAULT_SIZE) -> None:
        self.size = Vector2(size)
        self.centre = Vector2(centre) if centre is not None else self.size / 2

    def set_centre(self, position: Any) -> None:
        """Move the view so that ``position`` is at its centre."""
        self.centre = Vector2(position)

    @property
    def offset(self) -> Vector2:
        """World position of the view's top-left corner."""
        return self.centre - self.size / 2

    def update_view(self, window: Any) -> Vector2:
        """Fit the view to ``window``'s size and return the resulting offset."""
        width, height = window.get_size()
        self.size = Vector2(float(width), float(height))
        return self.offset

    def to_screen(self, point: Any) -> Vector2:
        """Convert a world position to a position on screen."""
        return Vector2(point) - self.offset