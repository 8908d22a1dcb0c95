"""Frame animations over a sprite sheet."""

from __future__ import annotations

import pygame

from spritequest.sprite import Sprite


class Animation:
    """Steps a sprite's texture rectangle along one row of a sprite sheet."""

    def __init__(
        self,
        sprite: Sprite,
        texture_sheet: pygame.Surface,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animation_timer = animation_timer
        self.timer = 0.0
        self.width = width
        self.height = height
        self.start_rect = pygame.Rect(start_frame_x * width, start_frame_y * height, width, height)
        self.current_rect = self.start_rect.copy()
        self.end_rect = pygame.Rect(frames_x * width, frames_y * height, width, height)

        self.sprite.set_texture(self.texture_sheet, reset_rect=True)
        self.sprite.texture_rect = self.start_rect.copy()

    def play(self, dt: float) -> None:
        """Advance the timer and switch to the next frame when it runs out."""
        self.timer += 100.0 * dt
        if self.timer < self.animation_timer:
            return
        self.timer = 0.0
        if self.current_rect != self.end_rect:
            self.current_rect.left += self.width
        else:
            self.current_rect.left = self.start_rect.left
        self.sprite.texture_rect = self.current_rect.copy()

    def reset(self) -> None:
        """Go back to the first frame with a fresh timer."""
        self.timer = 0.0
        self.current_rect = self.start_rect.copy()


class AnimationComponent:
    """Named animations for one sprite, of which one plays at a time."""

    def __init__(self, sprite: Sprite, texture_sheet: pygame.Surface) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animations: dict[str, Animation] = {}
        self.last_animation: Animation | None = None

    def add_animation(
        self,
        key: str,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        """Register an animation under ``key``, replacing any earlier one."""
        self.animations[key] = Animation(
            self.sprite,
            self.texture_sheet,
            animation_timer,
            start_frame_x,
            start_frame_y,
            frames_x,
            frames_y,
            width,
            height,
        )

    def play(self, key: str, dt: float) -> None:
        """Play the animation ``key``, resetting the one that played before it."""
        animation = self.animations[key]
        if self.last_animation is not animation:
            if self.last_animation is not None:
                self.last_animation.reset()
            self.last_animation = animation
        animation.play(dt)