"""Clickable menu buttons."""

from __future__ import annotations

import enum

import pygame

ColorLike = pygame.Color | tuple[int, ...]


class ButtonState(enum.IntEnum):
    """How the mouse relates to a button."""

    IDLE = 0
    HOVER = 1
    ACTIVE = 2


class Button:
    """A labelled rectangle that changes colour on hover and press."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font: str | None,
        text: str,
        character_size: int,
        text_idle_color: ColorLike,
        text_hover_color: ColorLike,
        text_active_color: ColorLike,
        idle_color: ColorLike,
        hover_color: ColorLike,
        active_color: ColorLike,
    ) -> None:
        """Build a button; ``font`` is a font file path, or None for the default font."""
        if not pygame.font.get_init():
            pygame.font.init()
        self.state = ButtonState.IDLE
        self.x, self.y, self.width, self.height = x, y, width, height
        self.font = pygame.font.Font(font, character_size)
        self.text = text

        self.text_colors = {
            ButtonState.IDLE: pygame.Color(text_idle_color),
            ButtonState.HOVER: pygame.Color(text_hover_color),
            ButtonState.ACTIVE: pygame.Color(text_active_color),
        }
        self.fill_colors = {
            ButtonState.IDLE: pygame.Color(idle_color),
            ButtonState.HOVER: pygame.Color(hover_color),
            ButtonState.ACTIVE: pygame.Color(active_color),
        }
        self.fill_color = self.fill_colors[ButtonState.IDLE]
        self.text_color = self.text_colors[ButtonState.IDLE]

        self.text_size = self.font.size(text)
        text_w, text_h = self.text_size
        self.text_position = (
            x + width / 2.0 - text_w / 2.0,
            y + height / 2.0 - text_h / 2.0,
        )

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the button's rectangle."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def is_pressed(self) -> bool:
        """Whether the button is being clicked."""
        return self.state is ButtonState.ACTIVE

    def update(self, mouse_pos: tuple[float, float], mouse_pressed: bool) -> None:
        """Work out the state from the mouse and recolour the button."""
        self.state = ButtonState.IDLE
        if self.contains(mouse_pos):
            self.state = ButtonState.ACTIVE if mouse_pressed else ButtonState.HOVER
        self.fill_color = self.fill_colors[self.state]
        self.text_color = self.text_colors[self.state]

    def render(self, target: pygame.Surface) -> None:
        """Draw the rectangle and its label onto ``target``."""
        shape = pygame.Surface((int(self.width), int(self.height)), pygame.SRCALPHA)
        shape.fill(self.fill_color)
        target.blit(shape, (int(self.x), int(self.y)))

        label = self.font.render(self.text, True, self.text_color)
        label.set_alpha(self.text_color.a)
        target.blit(label, (int(self.text_position[0]), int(self.text_position[1])))