# spritequest

A small sprite-based role-playing game built on pygame. It opens a window
with a main menu from which you can start a new game, open the editor or
quit. In the game an animated player moves around the screen with
acceleration, deceleration and a capped speed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
spritequest
```

The command takes no options other than `--help`. It reads its files
relative to the current directory, which must be laid out like this:

```
Config/window.ini
Config/supported_keys.ini
Config/mainmenustate_keybinds.ini
Config/gamestate_keybinds.ini
Config/editorstate_keybinds.ini
Fonts/Dosis-Light.ttf
Resources/Images/Backgrounds/bg1.png
Resources/Images/Sprites/Player/PLAYER_SHEET.png
```

The font, the background and the player sheet are required: when one of
them cannot be loaded, the screen that needs it raises `FileNotFoundError`.
The configuration files are optional; a missing one counts as empty.

The main menu has four buttons. "New Game" pushes the game screen, "Editor"
pushes the editor screen and "Quit" closes the menu; when no screen is left
the game prints `Ending Application!` and the window closes. Closing the
window also ends the game.

### Config/window.ini

The first line is the window title. After it come, separated by whitespace:

```
My Game Title
1920 1080
0
120
0
0
```

the width and height, fullscreen (`0` or `1`), the frame-rate limit,
vertical sync (`0` or `1`) and the antialiasing level. Reading stops at the
first value that is missing or malformed; that value and the ones after it
keep their defaults. The defaults (also used without the file) are the title
`None`, a size of `0 0` (which pygame opens at the desktop's size), windowed
mode, 120 frames per second and no vertical sync. The antialiasing level is
read into the configuration but not applied to the window.

### Config/supported_keys.ini

Pairs of a key name and a pygame key code, separated by whitespace. Reading
stops at the first pair whose code is not a whole number. The table is
printed at start-up.

```
Escape 27
A 97
D 100
W 119
S 115
```

### State keybinds

Each screen reads pairs of an action and a key name from
`supported_keys.ini`. A key name that is not in that table raises
`KeyError`.

```
CLOSE Escape
MOVE_LEFT A
MOVE_RIGHT D
MOVE_UP W
MOVE_DOWN S
```

The game screen needs `MOVE_LEFT`, `MOVE_RIGHT`, `MOVE_UP`, `MOVE_DOWN` and
`CLOSE`; the editor needs `CLOSE`. The main menu reads its file but uses no
keys.

## What the game does not do

- The "Settings" button on the main menu does nothing; there is no settings
  screen.
- The editor screen has no buttons and no editing tools; it can only be
  closed with its `CLOSE` key.
- The player has two animations, standing (`IDLE_LEFT`) and walking left
  (`WALK_LEFT`); moving in other directions keeps the last frame shown.
- Nothing is saved: there is no storage of games or levels.

## Using the pieces

The building blocks can be used on their own:

```python
from spritequest.sprite import Sprite
from spritequest.movement import MovementComponent, MovementState

sprite = Sprite()
movement = MovementComponent(sprite, max_velocity=300.0, acceleration=15.0, deceleration=5.0)
movement.move(-1.0, 0.0, dt=0.016)
movement.update(0.016)
assert movement.check_state(MovementState.MOVING_LEFT)
```

- `spritequest.sprite.Sprite` holds a texture, the rectangle of it that is
  shown and a position; it can be moved and drawn onto a surface.
- `spritequest.movement.MovementComponent` accelerates a sprite, slows it
  down each update and caps its speed; `check_state` answers questions
  given as `MovementState` values.
- `spritequest.animation.AnimationComponent` holds named `Animation`s that
  step a sprite along a row of a texture sheet; switching to another
  animation resets the previous one.
- `spritequest.entity.Entity` combines a sprite with optional movement and
  animation components; `Player` is the animated player character.
- `spritequest.button.Button` is a labelled rectangle with idle, hover and
  active colours; `update(mouse_pos, mouse_pressed)` sets its
  `ButtonState`.
- `spritequest.state.State` is the base of the screens, and
  `spritequest.state.load_keybinds` reads a keybind file against a table of
  supported keys.
- `spritequest.states` has `MainMenuState`, `GameState` and `EditorState`;
  `spritequest.game` has `Game`, `read_window_config`,
  `read_supported_keys` and the `main` function behind the command.