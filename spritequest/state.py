"""Base class for screens of the game and keybinding files."""

from __future__ import annotations

import abc
from pathlib import Path

import pygame


def load_keybinds(path: str | Path, supported_keys: dict[str, int]) -> dict[str, int]:
    """Read ``ACTION KEYNAME`` pairs and map each action to its key code.

    A missing file gives no bindings; a key name not in ``supported_keys``
    raises KeyError.
    """
    try:
        words = Path(path).read_text().split()
    except FileNotFoundError:
        return {}
    pairs = iter(words)
    return {action: supported_keys[key_name] for action, key_name in zip(pairs, pairs)}


class State(abc.ABC):
    """One screen of the game, kept on a stack of states."""

    def __init__(
        self,
        window: pygame.Surface,
        supported_keys: dict[str, int],
        states: list[State],
    ) -> None:
        self.window = window
        self.supported_keys = supported_keys
        self.states = states
        self.keybinds: dict[str, int] = {}
        self.textures: dict[str, pygame.Surface] = {}
        self._quit = False
        self.mouse_pos_window = (0, 0)
        self.mouse_pos_view = pygame.math.Vector2(0.0, 0.0)

    @property
    def quit(self) -> bool:
        """Whether the state has asked to be closed."""
        return self._quit

    def end_state(self) -> None:
        """Ask for this state to be closed."""
        self._quit = True

    def update_mouse_positions(self) -> None:
        """Record the cursor position in window pixels and in view coordinates."""
        x, y = pygame.mouse.get_pos()
        self.mouse_pos_window = (x, y)
        self.mouse_pos_view = pygame.math.Vector2(float(x), float(y))

    @abc.abstractmethod
    def update_input(self, dt: float) -> None:
        """React to keyboard input."""

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by one frame."""

    @abc.abstractmethod
    def render(self, target: pygame.Surface | None = None) -> None:
        """Draw the state onto ``target``, or the window when none is given."""