import pygame
import pytest

from spritequest.movement import MovementComponent, MovementState
from spritequest.sprite import Sprite


def make(max_velocity=300.0, acceleration=15.0, deceleration=5.0):
    return MovementComponent(Sprite(), max_velocity, acceleration, deceleration)


def test_new_component_is_idle():
    component = make()
    assert component.check_state(MovementState.IDLE) is True
    assert component.check_state(MovementState.MOVING) is False


def test_move_adds_acceleration():
    component = make(acceleration=15.0)
    component.move(1.0, 0.0, 0.1)
    assert component.velocity.x == 15.0
    assert component.velocity.y == 0.0
    assert component.check_state(MovementState.MOVING_RIGHT)
    assert component.check_state(MovementState.MOVING)
    assert not component.check_state(MovementState.MOVING_LEFT)


@pytest.mark.parametrize(
    "direction, expected",
    [
        ((-1.0, 0.0), MovementState.MOVING_LEFT),
        ((1.0, 0.0), MovementState.MOVING_RIGHT),
        ((0.0, -1.0), MovementState.MOVING_UP),
        ((0.0, 1.0), MovementState.MOVING_DOWN),
    ],
)
def test_direction_states(direction, expected):
    component = make()
    component.move(*direction, 0.1)
    matching = [s for s in MovementState if component.check_state(s)]
    assert matching == [MovementState.MOVING, expected]


def test_update_caps_then_decelerates():
    component = make(max_velocity=300.0, acceleration=500.0, deceleration=5.0)
    component.move(1.0, -1.0, 0.1)
    component.update(0.0)
    assert component.velocity.x == pytest.approx(component.max_velocity - component.deceleration)
    assert component.velocity.y == pytest.approx(-(component.max_velocity - component.deceleration))


def test_deceleration_stops_at_zero():
    component = make(acceleration=3.0, deceleration=5.0)
    component.move(-1.0, 1.0, 0.1)
    component.update(0.1)
    assert component.velocity == pygame.math.Vector2(0.0, 0.0)
    assert component.check_state(MovementState.IDLE)


def test_update_moves_sprite_by_velocity_times_dt():
    component = make()
    component.move(1.0, 1.0, 0.5)
    component.update(0.5)
    assert component.sprite.position == component.velocity * 0.5


def test_unknown_state_is_false():
    component = make()
    assert component.check_state(99) is False