"""Named input bindings that can be queried each frame."""

from __future__ import annotations

from typing import Callable, ClassVar

import pygame

InputQuery = Callable[[], bool]

_MOUSE_BUTTONS = 5


class InputHandler:
    """Maps input names to queries that report whether the input is held."""

    _instance: ClassVar[InputHandler | None] = None

    def __init__(self) -> None:
        self._queries: dict[str, InputQuery] = {}

    @classmethod
    def get_instance(cls) -> InputHandler:
        """Return the shared handler, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def bind(self, input_name: str, query: InputQuery) -> None:
        """Bind ``input_name`` to ``query`` unless the name is already bound."""
        self._queries.setdefault(input_name, query)

    def bind_key(self, input_name: str, key: int) -> None:
        """Bind ``input_name`` to a keyboard key constant."""
        self.bind(input_name, lambda: bool(pygame.key.get_pressed()[key]))

    def bind_mouse_button(self, input_name: str, button: int) -> None:
        """Bind ``input_name`` to a mouse button constant such as ``pygame.BUTTON_LEFT``."""
        if not 1 <= button <= _MOUSE_BUTTONS:
            raise ValueError(f"unknown mouse button {button}")
        index = button - 1
        self.bind(input_name, lambda: bool(pygame.mouse.get_pressed(num_buttons=_MOUSE_BUTTONS)[index]))

    def is_button_down(self, input_name: str) -> bool:
        """Return whether the input bound to ``input_name`` is held; unbound names are not."""
        query = self._queries.get(input_name)
        return bool(query()) if query is not None else False

    def __contains__(self, input_name: object) -> bool:
        return input_name in self._queries