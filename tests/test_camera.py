import pygame
from pygame.math import Vector2

from shooter.camera import Camera


def test_default_view_starts_at_origin():
    assert Camera().offset == Vector2(0, 0)


def test_set_centre_moves_view():
    camera = Camera()
    camera.set_centre((120, -40))
    assert camera.centre == Vector2(120, -40)
    assert camera.offset + camera.size / 2 == Vector2(120, -40)


def test_update_view_takes_window_size():
    camera = Camera()
    window = pygame.Surface((800, 600))
    camera.update_view(window)
    assert camera.size == Vector2(800, 600)


def test_update_view_returns_offset_around_centre():
    camera = Camera()
    camera.set_centre((10, 20))
    offset = camera.update_view(pygame.Surface((64, 48)))
    assert offset == camera.offset
    assert offset + camera.size / 2 == Vector2(10, 20)


def test_centre_maps_to_middle_of_screen():
    camera = Camera()
    camera.set_centre((300, 300))
    camera.update_view(pygame.Surface((200, 100)))
    assert camera.to_screen((300, 300)) == camera.size / 2


def test_set_centre_keeps_size():
    camera = Camera(size=(50, 50))
    camera.set_centre((5, 5))
    assert camera.size == Vector2(50, 50)