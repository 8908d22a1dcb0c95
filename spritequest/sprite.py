"""A textured, positioned image that can be moved and drawn onto a surface."""

from __future__ import annotations

import pygame


class Sprite:
    """A texture, the part of it that is shown, and a position in the world."""

    def __init__(self, texture: pygame.Surface | None = None) -> None:
        self.texture: pygame.Surface | None = None
        self.texture_rect = pygame.Rect(0, 0, 0, 0)
        self.position = pygame.math.Vector2(0.0, 0.0)
        if texture is not None:
            self.set_texture(texture)

    def set_texture(self, texture: pygame.Surface, reset_rect: bool = False) -> None:
        """Use ``texture``; show all of it if asked to or if no area was chosen yet."""
        self.texture = texture
        if reset_rect or self.texture_rect.width == 0 or self.texture_rect.height == 0:
            self.texture_rect = pygame.Rect((0, 0), texture.get_size())

    def move(self, dx: float, dy: float) -> None:
        """Shift the sprite by an offset."""
        self.position += pygame.math.Vector2(dx, dy)

    def draw(self, target: pygame.Surface) -> None:
        """Blit the visible part of the texture onto ``target`` at the sprite's position."""
        if self.texture is None:
            return
        target.blit(
            self.texture,
            (int(self.position.x), int(self.position.y)),
            self.texture_rect,
        )