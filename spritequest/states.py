"""The game's screens: the main menu, the game itself and the editor."""

from __future__ import annotations

from pathlib import Path

import pygame

from spritequest.button import Button
from spritequest.entity import Player
from spritequest.state import State, load_keybinds

FONT_PATH = Path("Fonts/Dosis-Light.ttf")
BACKGROUND_PATH = Path("Resources/Images/Backgrounds/bg1.png")
PLAYER_SHEET_PATH = Path("Resources/Images/Sprites/Player/PLAYER_SHEET.png")
GAME_KEYBINDS_PATH = Path("Config/gamestate_keybinds.ini")
EDITOR_KEYBINDS_PATH = Path("Config/editorstate_keybinds.ini")
MAIN_MENU_KEYBINDS_PATH = Path("Config/mainmenustate_keybinds.ini")

_TEXT_IDLE = (70, 70, 70, 200)
_TEXT_HOVER = (250, 250, 250, 250)
_TEXT_ACTIVE = (20, 20, 20, 50)
_HOVER = (150, 150, 150, 0)
_ACTIVE = (20, 20, 20, 0)

# key, top edge, label, idle fill colour
_MENU_BUTTONS = (
    ("GAME_STATE", 480.0, "New Game", (70, 70, 70, 0)),
    ("SETTINGS", 580.0, "Settings", (70, 70, 70, 0)),
    ("EDITOR_STATE", 680.0, "Editor", (70, 70, 70, 0)),
    ("EXIT_STATE", 880.0, "Quit", (100, 100, 100, 0)),
)


def _load_font(path: Path) -> str:
    """Check that ``path`` is a usable font and return it for buttons to open."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        pygame.font.Font(str(path), 12)
    except (OSError, pygame.error) as exc:
        raise FileNotFoundError(f"could not load font {path}") from exc
    return str(path)


def _load_texture(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        raise FileNotFoundError(f"could not load texture {path}") from exc


def _key_down(code: int) -> bool:
    return bool(pygame.key.get_pressed()[code])


def _left_button_down() -> bool:
    return bool(pygame.mouse.get_pressed()[0])


class GameState(State):
    """Gameplay: the player walking around the world."""

    def __init__(
        self,
        window: pygame.Surface,
        supported_keys: dict[str, int],
        states: list[State],
    ) -> None:
        super().__init__(window, supported_keys, states)
        self.keybinds = load_keybinds(GAME_KEYBINDS_PATH, self.supported_keys)
        self.textures["PLAYER_SHEET"] = _load_texture(PLAYER_SHEET_PATH)
        self.player = Player(0.0, 0.0, self.textures["PLAYER_SHEET"])

    def update_input(self, dt: float) -> None:
        """Steer the player with the movement keys; close on the close key."""
        directions = (
            ("MOVE_LEFT", -1.0, 0.0),
            ("MOVE_RIGHT", 1.0, 0.0),
            ("MOVE_UP", 0.0, -1.0),
            ("MOVE_DOWN", 0.0, 1.0),
        )
        for action, dir_x, dir_y in directions:
            if _key_down(self.keybinds[action]):
                self.player.move(dir_x, dir_y, dt)
        if _key_down(self.keybinds["CLOSE"]):
            self.end_state()

    def update(self, dt: float) -> None:
        """Read input and advance the player."""
        self.update_mouse_positions()
        self.update_input(dt)
        self.player.update(dt)

    def render(self, target: pygame.Surface | None = None) -> None:
        """Draw the player."""
        if target is None:
            target = self.window
        self.player.render(target)


class EditorState(State):
    """The level editor screen."""

    def __init__(
        self,
        window: pygame.Surface,
        supported_keys: dict[str, int],
        states: list[State],
    ) -> None:
        super().__init__(window, supported_keys, states)
        self.font = _load_font(FONT_PATH)
        self.keybinds = load_keybinds(EDITOR_KEYBINDS_PATH, self.supported_keys)
        self.buttons: dict[str, Button] = {}

    def update_input(self, dt: float) -> None:
        """Close the editor on the close key."""
        if _key_down(self.keybinds["CLOSE"]):
            self.end_state()

    def update_buttons(self) -> None:
        """Let every button react to the mouse."""
        pressed = _left_button_down()
        for _, button in sorted(self.buttons.items()):
            button.update(self.mouse_pos_view, pressed)

    def update(self, dt: float) -> None:
        """Read the mouse and keyboard and update the buttons."""
        self.update_mouse_positions()
        self.update_input(dt)
        self.update_buttons()

    def render_buttons(self, target: pygame.Surface | None = None) -> None:
        """Draw every button."""
        if target is None:
            target = self.window
        for _, button in sorted(self.buttons.items()):
            button.render(target)

    def render(self, target: pygame.Surface | None = None) -> None:
        """Draw the editor."""
        if target is None:
            target = self.window
        self.render_buttons(target)


class MainMenuState(State):
    """The title screen with its menu of buttons."""

    def __init__(
        self,
        window: pygame.Surface,
        supported_keys: dict[str, int],
        states: list[State],
    ) -> None:
        super().__init__(window, supported_keys, states)
        self.background_texture = _load_texture(BACKGROUND_PATH)
        self.background = pygame.transform.scale(
            self.background_texture, self.window.get_size()
        )
        self.font = _load_font(FONT_PATH)
        self.keybinds = load_keybinds(MAIN_MENU_KEYBINDS_PATH, self.supported_keys)
        self.buttons: dict[str, Button] = {
            key: Button(
                300.0, top, 250.0, 50.0, self.font, label, 50,
                _TEXT_IDLE, _TEXT_HOVER, _TEXT_ACTIVE,
                idle, _HOVER, _ACTIVE,
            )
            for key, top, label, idle in _MENU_BUTTONS
        }

    def update_input(self, dt: float) -> None:
        """The menu takes no keyboard input."""

    def update_buttons(self) -> None:
        """Update the buttons and act on the one being clicked."""
        pressed = _left_button_down()
        for _, button in sorted(self.buttons.items()):
            button.update(self.mouse_pos_view, pressed)

        if self.buttons["GAME_STATE"].is_pressed():
            self.states.append(GameState(self.window, self.supported_keys, self.states))
        if self.buttons["EDITOR_STATE"].is_pressed():
            self.states.append(EditorState(self.window, self.supported_keys, self.states))
        if self.buttons["EXIT_STATE"].is_pressed():
            self.end_state()

    def update(self, dt: float) -> None:
        """Read the mouse and update the menu."""
        self.update_mouse_positions()
        self.update_input(dt)
        self.update_buttons()

    def render_buttons(self, target: pygame.Surface | None = None) -> None:
        """Draw every button."""
        if target is None:
            target = self.window
        for _, button in sorted(self.buttons.items()):
            button.render(target)

    def render(self, target: pygame.Surface | None = None) -> None:
        """Draw the background and then the buttons."""
        if target is None:
            target = self.window
        target.blit(self.background, (0, 0))
        self.render_buttons(target)