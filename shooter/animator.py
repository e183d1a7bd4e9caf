"""Sprite-sheet frame selection and timed frame cycling."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

Clock = Callable[[], float]


@dataclass(frozen=True)
class AnimationInfo:
    """Frame size of a sprite sheet and the number of frames in each column."""

    width: int
    height: int
    columns: Sequence[int] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))


class Animator:
    """Picks frames out of a sprite sheet and advances them over time."""

    def __init__(self, info: AnimationInfo, clock: Clock = time.monotonic) -> None:
        self.info = info
        self._clock = clock
        self._started = clock()
        self._current_row = 0

    @property
    def current_row(self) -> int:
        """The frame within the animated column that is currently shown."""
        return self._current_row

    def get_frame(self, row: int, column: int) -> pygame.Rect:
        """Return the sheet rectangle of the frame at ``row`` and ``column``."""
        width, height = self.info.width, self.info.height
        return pygame.Rect(width * row, height * column, width, height)

    def animate(self, column: int, interval: float) -> pygame.Rect:
        """Advance to the next frame of ``column`` once ``interval`` milliseconds have passed."""
        elapsed_ms = int((self._clock() - self._started) * 1000)
        if elapsed_ms >= interval:
            self._current_row = (self._current_row + 1) % self.info.columns[column]
            self._started = self._clock()
        return self.get_frame(self._current_row, column)