"""Velocity with acceleration, deceleration and a speed limit."""

from __future__ import annotations

import enum

import pygame

from spritequest.sprite import Sprite


class MovementState(enum.IntEnum):
    """Movement conditions that can be queried on a component."""

    IDLE = 0
    MOVING = 1
    MOVING_LEFT = 2
    MOVING_RIGHT = 3
    MOVING_UP = 4
    MOVING_DOWN = 5


class MovementComponent:
    """Accelerates a sprite, slows it down over time and caps its speed."""

    def __init__(
        self,
        sprite: Sprite,
        max_velocity: float,
        acceleration: float,
        deceleration: float,
    ) -> None:
        self.sprite = sprite
        self.max_velocity = max_velocity
        self.acceleration = acceleration
        self.deceleration = deceleration
        self.velocity = pygame.math.Vector2(0.0, 0.0)

    def check_state(self, state: MovementState | int) -> bool:
        """Whether the current velocity matches ``state``; unknown states never match."""
        try:
            state = MovementState(state)
        except ValueError:
            return False
        vx, vy = self.velocity.x, self.velocity.y
        checks = {
            MovementState.IDLE: vx == 0.0 and vy == 0.0,
            MovementState.MOVING: vx != 0.0 or vy != 0.0,
            MovementState.MOVING_LEFT: vx < 0.0,
            MovementState.MOVING_RIGHT: vx > 0.0,
            MovementState.MOVING_UP: vy < 0.0,
            MovementState.MOVING_DOWN: vy > 0.0,
        }
        return checks[state]

    def move(self, dir_x: float, dir_y: float, dt: float) -> None:
        """Accelerate in the given direction."""
        self.velocity.x += self.acceleration * dir_x
        self.velocity.y += self.acceleration * dir_y

    def _settle(self, value: float) -> float:
        if value > 0.0:
            value = min(value, self.max_velocity) - self.deceleration
            return max(value, 0.0)
        if value < 0.0:
            value = max(value, -self.max_velocity) + self.deceleration
            return min(value, 0.0)
        return value

    def update(self, dt: float) -> None:
        """Cap and decelerate the velocity, then move the sprite by it."""
        self.velocity.x = self._settle(self.velocity.x)
        self.velocity.y = self._settle(self.velocity.y)
        self.sprite.move(self.velocity.x * dt, self.velocity.y * dt)