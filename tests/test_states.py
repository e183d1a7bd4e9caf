import random

import pygame
import pytest

from shooter.input import InputHandler
from shooter.resources import ResourceContainer
from shooter.states import MENU_FONT, MENU_TITLE, MOVE_KEYS, GameState, MenuState, State, StateMachine


class Recording(State):
    def __init__(self, label="r"):
        self.label = label
        self.machine = None
        self.events = []
        self.deltas = []
        self.windows = []

    def init(self, state_machine):
        self.machine = state_machine

    def handle_event(self, state_machine, event):
        self.events.append(event.type)

    def update(self, state_machine, delta_time):
        self.deltas.append(delta_time)

    def render(self, window):
        self.windows.append(window)


class FakeFont:
    def __init__(self, path):
        self.path = path
        self.rendered = []

    def render(self, text, antialias, color):
        self.rendered.append(text)
        surface = pygame.Surface((4, 4))
        surface.fill(color)
        return surface


@pytest.fixture
def textures():
    return ResourceContainer("", lambda path: pygame.Surface((8, 8)))


def test_machine_without_state_raises():
    machine = StateMachine()
    with pytest.raises(RuntimeError):
        machine.update(0.1)


def test_set_state_builds_and_initialises():
    machine = StateMachine()
    state = machine.set_state(Recording, label="menu")
    assert machine.state is state
    assert state.label == "menu"
    assert state.machine is machine


def test_machine_forwards_to_current_state():
    machine = StateMachine()
    state = machine.set_state(Recording)
    machine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    machine.update(0.2)
    window = pygame.Surface((2, 2))
    machine.render(window)
    assert state.events == [pygame.KEYDOWN]
    assert state.deltas == [0.2]
    assert state.windows == [window]


def test_menu_switches_on_enter_release():
    fonts = ResourceContainer("fonts/", FakeFont)
    machine = StateMachine()
    menu = machine.set_state(MenuState, fonts, Recording)
    machine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert machine.state is menu
    machine.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN))
    assert isinstance(machine.state, Recording)
    assert machine.state.machine is machine


def test_menu_ignores_other_key_release():
    fonts = ResourceContainer("fonts/", FakeFont)
    machine = StateMachine()
    menu = machine.set_state(MenuState, fonts, Recording)
    machine.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
    assert machine.state is menu


def test_menu_loads_title_font_and_frees_others():
    fonts = ResourceContainer("fonts/", FakeFont)
    fonts.acquire("unused.ttf")
    StateMachine().set_state(MenuState, fonts, Recording)
    assert "unused.ttf" not in fonts
    font = fonts.acquire(MENU_FONT)
    assert font.path == "fonts/" + MENU_FONT
    assert font.rendered == [MENU_TITLE]


def test_menu_draws_title_in_white():
    fonts = ResourceContainer("fonts/", FakeFont)
    menu = StateMachine().set_state(MenuState, fonts, Recording)
    window = pygame.Surface((10, 10))
    menu.render(window)
    assert window.get_at((0, 0)) == pygame.Color("white")


def test_game_state_binds_move_inputs(textures):
    handler = InputHandler()
    GameState(handler, textures)
    assert all(name in handler for name in MOVE_KEYS)


def test_game_state_requires_init(textures):
    state = GameState(InputHandler(), textures)
    with pytest.raises(RuntimeError):
        state.update(StateMachine(), 0.1)


def test_game_state_creates_world(textures):
    machine = StateMachine()
    state = machine.set_state(GameState, InputHandler(), textures, random.Random(5))
    assert len(state.entities.entity_manager) == 6
    machine.update(0.1)
    window = pygame.Surface((64, 48))
    machine.render(window)
    assert tuple(state.entities.camera.size) == (64.0, 48.0)