"""The game window, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pygame

from spritequest.state import State
from spritequest.states import MainMenuState

WINDOW_CONFIG_PATH = Path("Config/window.ini")
SUPPORTED_KEYS_PATH = Path("Config/supported_keys.ini")


@dataclass
class WindowConfig:
    """Window options; a width and height of 0 mean the desktop's size."""

    title: str = "None"
    width: int = 0
    height: int = 0
    fullscreen: bool = False
    framerate_limit: int = 120
    vertical_sync: bool = False
    antialiasing_level: int = 0

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


def _flag(token: str) -> bool:
    if token == "0":
        return False
    if token == "1":
        return True
    raise ValueError(f"not a flag: {token!r}")


_WINDOW_FIELDS: tuple[tuple[str, Callable[[str], object]], ...] = (
    ("width", int),
    ("height", int),
    ("fullscreen", _flag),
    ("framerate_limit", int),
    ("vertical_sync", _flag),
    ("antialiasing_level", int),
)


def read_window_config(path: str | Path) -> WindowConfig:
    """Read a title line followed by width, height, fullscreen, framerate, vsync, antialiasing.

    A missing file gives the defaults; reading stops at the first value that
    is absent or malformed, leaving it and the rest at their defaults.
    """
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return WindowConfig()
    if not text:
        return WindowConfig()
    title, _, rest = text.partition("\n")
    tokens = iter(rest.split())
    values: dict[str, object] = {}
    for name, convert in _WINDOW_FIELDS:
        try:
            values[name] = convert(next(tokens))
        except (StopIteration, ValueError):
            break
    return WindowConfig(title=title.rstrip("\r"), **values)


def read_supported_keys(path: str | Path) -> dict[str, int]:
    """Read ``NAME CODE`` pairs; stop at the first pair whose code is not a number."""
    try:
        words = Path(path).read_text().split()
    except FileNotFoundError:
        return {}
    pairs = iter(words)
    keys: dict[str, int] = {}
    for name, value in zip(pairs, pairs):
        try:
            keys[name] = int(value)
        except ValueError:
            break
    return keys


class Game:
    """Owns the window and the stack of states and runs the main loop."""

    def __init__(self) -> None:
        pygame.init()
        self.dt = 0.0
        self._clock = pygame.time.Clock()

        self.config = read_window_config(WINDOW_CONFIG_PATH)
        self.window = self._open_window()
        self.is_open = True

        self.supported_keys = read_supported_keys(SUPPORTED_KEYS_PATH)
        for name, value in sorted(self.supported_keys.items()):
            print(f"{name} {value}")

        self.states: list[State] = []
        self.states.append(MainMenuState(self.window, self.supported_keys, self.states))

    def _open_window(self) -> pygame.Surface:
        flags = pygame.FULLSCREEN if self.config.fullscreen else 0
        pygame.display.set_caption(self.config.title)
        try:
            return pygame.display.set_mode(
                self.config.size, flags, vsync=int(self.config.vertical_sync)
            )
        except pygame.error:
            return pygame.display.set_mode(self.config.size, flags)

    def end_application(self) -> None:
        """Announce that the game is shutting down."""
        print("Ending Application!")

    def update_dt(self) -> None:
        """Measure the seconds the last frame took, holding to the frame-rate limit."""
        self.dt = self._clock.tick(self.config.framerate_limit) / 1000.0

    def update_events(self) -> None:
        """Handle window events; a close request closes the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_open = False

    def update(self) -> None:
        """Update the top state, dropping it when it quits; close when none are left."""
        self.update_events()
        if self.states:
            top = self.states[-1]
            top.update(self.dt)
            if top.quit:
                top.end_state()
                self.states.pop()
        else:
            self.end_application()
            self.is_open = False

    def render(self) -> None:
        """Clear the window, draw the top state and show the frame."""
        self.window.fill((0, 0, 0))
        if self.states:
            self.states[-1].render()
        pygame.display.flip()

    def run(self) -> None:
        """Run frames until the window closes."""
        try:
            while self.is_open:
                self.update_dt()
                self.update()
                self.render()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game using the resources in the current directory."""
    parser = argparse.ArgumentParser(
        prog="spritequest",
        description="Run the game with the Config, Fonts and Resources folders "
        "of the current directory.",
    )
    parser.parse_args(argv)
    Game().run()
    return 0