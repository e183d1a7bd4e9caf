"""Game states and the machine that switches between them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

import pygame

from .factory import Entities
from .input import InputHandler
from .resources import ResourceContainer, ResourceManager

StateT = TypeVar("StateT", bound="State")

MOVE_KEYS = {
    "move_up": pygame.K_w,
    "move_down": pygame.K_s,
    "move_left": pygame.K_a,
    "move_right": pygame.K_d,
}

MENU_TITLE = "Top-Down Shooter! (Press Enter to continue)"
MENU_FONT = "thinPix.ttf"
MENU_TITLE_POSITION = (0, 0)


class State(ABC):
    """One screen of the game."""

    def init(self, state_machine: StateMachine) -> None:
        """Prepare the state once it has become current."""

    def handle_event(self, state_machine: StateMachine, event: pygame.event.Event) -> None:
        """React to a window event."""

    @abstractmethod
    def update(self, state_machine: StateMachine, delta_time: float) -> None:
        """Advance the state by ``delta_time`` seconds."""

    @abstractmethod
    def render(self, window: pygame.Surface) -> None:
        """Draw the state onto ``window``."""


class StateMachine:
    """Holds the current state and forwards the frame's work to it."""

    def __init__(self) -> None:
        self._state: State | None = None

    @property
    def state(self) -> State | None:
        return self._state

    def set_state(self, state_type: Callable[..., StateT], *args: Any, **kwargs: Any) -> StateT:
        """Replace the current state with a new one built from the arguments."""
        state = state_type(*args, **kwargs)
        self._state = state
        state.init(self)
        return state

    def _current(self) -> State:
        if self._state is None:
            raise RuntimeError("no state has been set")
        return self._state

    def handle_event(self, event: pygame.event.Event) -> None:
        self._current().handle_event(self, event)

    def update(self, delta_time: float) -> None:
        self._current().update(self, delta_time)

    def render(self, window: pygame.Surface) -> None:
        self._current().render(window)


class GameState(State):
    """The playing field."""

    def __init__(
        self,
        input_handler: InputHandler | None = None,
        textures: ResourceContainer[pygame.Surface] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._input_handler = input_handler if input_handler is not None else InputHandler.get_instance()
        for input_name, key in MOVE_KEYS.items():
            self._input_handler.bind_key(input_name, key)
        self._textures = textures
        self._rng = rng
        self._entities: Entities | None = None

    @property
    def entities(self) -> Entities | None:
        return self._entities

    def _world(self) -> Entities:
        if self._entities is None:
            raise RuntimeError("game state has not been initialised")
        return self._entities

    def init(self, state_machine: StateMachine) -> None:
        self._entities = Entities(textures=self._textures, input_handler=self._input_handler, rng=self._rng)
        self._entities.create()

    def handle_event(self, state_machine: StateMachine, event: pygame.event.Event) -> None:
        pass

    def update(self, state_machine: StateMachine, delta_time: float) -> None:
        self._world().update(delta_time)

    def render(self, window: pygame.Surface) -> None:
        self._world().render(window)


class MenuState(State):
    """The title screen; Enter starts the game."""

    def __init__(
        self,
        fonts: ResourceContainer[Any] | None = None,
        next_state: Callable[[], State] = GameState,
    ) -> None:
        self._fonts = fonts
        self._next_state = next_state
        self._font: Any = None
        self._text: pygame.Surface | None = None
        self.title = MENU_TITLE

    def init(self, state_machine: StateMachine) -> None:
        fonts = self._fonts if self._fonts is not None else ResourceManager.get_instance().font_container
        self._font = fonts.acquire(MENU_FONT)
        fonts.free_orphan_resources()
        self._text = self._font.render(self.title, True, pygame.Color("white"))

    def handle_event(self, state_machine: StateMachine, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYUP and getattr(event, "key", None) == pygame.K_RETURN:
            state_machine.set_state(self._next_state)

    def update(self, state_machine: StateMachine, delta_time: float) -> None:
        pass

    def render(self, window: pygame.Surface) -> None:
        if self._text is not None:
            window.blit(self._text, MENU_TITLE_POSITION)