import pygame
import pytest

from shooter.animator import AnimationInfo, Animator


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def animator(clock):
    return Animator(AnimationInfo(16, 32, [3, 2]), clock=clock)


def test_info_columns_become_tuple():
    info = AnimationInfo(8, 8, [1, 2, 3])
    assert info.columns == (1, 2, 3)


def test_first_frame_starts_at_origin(animator):
    frame = animator.get_frame(0, 0)
    assert frame.topleft == (0, 0)
    assert frame.size == (16, 32)


def test_frames_tile_the_sheet(animator):
    origin = animator.get_frame(0, 0)
    assert animator.get_frame(1, 0).left == origin.right
    assert animator.get_frame(0, 1).top == origin.bottom
    assert animator.get_frame(1, 1).topleft == (origin.right, origin.bottom)


def test_animate_holds_frame_before_interval(animator, clock):
    clock.now = 0.0005
    assert animator.animate(0, 100) == animator.get_frame(0, 0)
    assert animator.current_row == 0


def test_animate_advances_after_interval(animator, clock):
    clock.now = 0.2
    assert animator.animate(0, 100) == animator.get_frame(1, 0)
    assert animator.current_row == 1


def test_animate_wraps_around_column_length(animator, clock):
    rows = []
    for _ in range(3):
        clock.now += 1.0
        animator.animate(0, 100)
        rows.append(animator.current_row)
    assert rows == [1, 2, 0]


def test_animate_restarts_timer(animator, clock):
    clock.now = 1.0
    animator.animate(1, 100)
    clock.now = 1.05
    animator.animate(1, 100)
    assert animator.current_row == 1


def test_animate_uses_requested_column(animator, clock):
    clock.now = 1.0
    frame = animator.animate(1, 100)
    assert frame == animator.get_frame(1, 1)


def test_animate_unknown_column_raises(animator, clock):
    clock.now = 1.0
    with pytest.raises(IndexError):
        animator.animate(5, 100)


def test_frame_is_pygame_rect(animator):
    assert animator.get_frame(2, 1) == pygame.Rect(animator.get_frame(2, 1))