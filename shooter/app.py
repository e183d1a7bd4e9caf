"""The game window and its main loop."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Sequence

import pygame

from .states import MenuState, State, StateMachine

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Top-Down Shooter"
CLEAR_COLOUR = (200, 200, 200)


class Application:
    """Opens the window and drives the state machine once per frame."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        title: str = WINDOW_TITLE,
        initial_state: Callable[[], State] = MenuState,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        pygame.display.init()
        pygame.font.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.state_machine = StateMachine()
        self.state_machine.set_state(initial_state)
        self._clock = clock
        self._last_tick = clock()

    def execute(self) -> None:
        """Run frames until the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                self.state_machine.handle_event(event)
                if event.type == pygame.QUIT:
                    running = False

            self.window.fill(CLEAR_COLOUR)

            now = self._clock()
            self.state_machine.update(now - self._last_tick)
            self._last_tick = now

            self.state_machine.render(self.window)
            pygame.display.flip()
        pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="shooter", description="A top-down shooter.")
    parser.parse_args(argv)
    Application(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE).execute()
    return 0