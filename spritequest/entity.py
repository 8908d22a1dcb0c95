"""Game objects built from a sprite and optional components."""

from __future__ import annotations

import pygame

from spritequest.animation import AnimationComponent
from spritequest.movement import MovementComponent, MovementState
from spritequest.sprite import Sprite


class Entity:
    """Something in the world with a sprite and optional movement and animation."""

    def __init__(self) -> None:
        self.sprite = Sprite()
        self.movement_component: MovementComponent | None = None
        self.animation_component: AnimationComponent | None = None

    def set_texture(self, texture: pygame.Surface) -> None:
        """Show ``texture`` on the entity's sprite."""
        self.sprite.set_texture(texture)

    def create_movement_component(
        self, max_velocity: float, acceleration: float, deceleration: float
    ) -> None:
        """Give the entity the ability to move."""
        self.movement_component = MovementComponent(
            self.sprite, max_velocity, acceleration, deceleration
        )

    def create_animation_component(self, texture_sheet: pygame.Surface) -> None:
        """Give the entity animations taken from ``texture_sheet``."""
        self.animation_component = AnimationComponent(self.sprite, texture_sheet)

    def set_position(self, x: float, y: float) -> None:
        """Place the entity at ``(x, y)``."""
        self.sprite.position = pygame.math.Vector2(x, y)

    def move(self, dir_x: float, dir_y: float, dt: float) -> None:
        """Accelerate in a direction, if the entity can move."""
        if self.movement_component is not None:
            self.movement_component.move(dir_x, dir_y, dt)

    def update(self, dt: float) -> None:
        """Per-frame update; a plain entity has nothing to advance."""

    def render(self, target: pygame.Surface) -> None:
        """Draw the entity onto ``target``."""
        self.sprite.draw(target)


class Player(Entity):
    """The player character, animated from a 192-pixel sprite sheet."""

    def __init__(self, x: float, y: float, texture_sheet: pygame.Surface) -> None:
        super().__init__()
        self.set_position(x, y)
        self.create_movement_component(300.0, 15.0, 5.0)
        self.create_animation_component(texture_sheet)
        assert self.animation_component is not None
        self.animation_component.add_animation("IDLE_LEFT", 10.0, 0, 0, 13, 0, 192, 192)
        self.animation_component.add_animation("WALK_LEFT", 10.0, 0, 1, 11, 1, 192, 192)

    def update(self, dt: float) -> None:
        """Move, then play the animation that fits the movement."""
        assert self.movement_component is not None
        assert self.animation_component is not None
        self.movement_component.update(dt)
        if self.movement_component.check_state(MovementState.IDLE):
            self.animation_component.play("IDLE_LEFT", dt)
        elif self.movement_component.check_state(MovementState.MOVING_LEFT):
            self.animation_component.play("WALK_LEFT", dt)