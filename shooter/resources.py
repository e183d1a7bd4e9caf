"""Shared, lazily loaded game resources."""

from __future__ import annotations

import weakref
from typing import Callable, ClassVar, Generic, TypeVar

import pygame

T = TypeVar("T")

FONT_SIZE = 30


class ResourceContainer(Generic[T]):
    """Loads resources from a folder once and hands out the shared copy."""

    def __init__(self, folder_path: str, loader: Callable[[str], T]) -> None:
        self._folder_path = folder_path
        self._loader = loader
        self._resources: dict[str, T] = {}

    @property
    def folder_path(self) -> str:
        return self._folder_path

    def acquire(self, name: str) -> T:
        """Return the resource called ``name``, loading it on first request."""
        try:
            return self._resources[name]
        except KeyError:
            resource = self._loader(self._folder_path + name)
            self._resources[name] = resource
            return resource

    def free_orphan_resources(self) -> None:
        """Drop every resource that nothing outside the container still uses."""
        kept: dict[str, T] = {}
        for name in list(self._resources):
            resource = self._resources.pop(name)
            try:
                ref = weakref.ref(resource)
            except TypeError:
                kept[name] = resource
                continue
            del resource
            survivor = ref()
            if survivor is not None:
                kept[name] = survivor
        self._resources = kept

    def __contains__(self, name: object) -> bool:
        return name in self._resources

    def __len__(self) -> int:
        return len(self._resources)


def _load_font(path: str) -> pygame.font.Font:
    return pygame.font.Font(path, FONT_SIZE)


class ResourceManager:
    """The game's texture, font and sound containers."""

    _instance: ClassVar[ResourceManager | None] = None

    def __init__(self) -> None:
        self.texture_container: ResourceContainer[pygame.Surface] = ResourceContainer(
            "res/textures/", pygame.image.load
        )
        self.font_container: ResourceContainer[pygame.font.Font] = ResourceContainer("res/fonts/", _load_font)
        self.sound_buffer_container: ResourceContainer[pygame.mixer.Sound] = ResourceContainer(
            "res/audio/", pygame.mixer.Sound
        )

    @classmethod
    def get_instance(cls) -> ResourceManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance