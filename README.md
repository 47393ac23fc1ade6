# pacmaze

A small top-down maze game. You move a player sprite around a tile map, eat
every collectible, and then walk onto the exit to win.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the game window.

## Playing

```
pacmaze path/to/level.ber
```

The same entry point can be started with `python -m pacmaze.app path/to/level.ber`.

Keys (held keys keep moving the player, 5 pixels per frame):

- `W` `A` `S` `D`: move up, left, down, right
- `Esc`: quit

The window is titled `pacmaze`. A move counter (`Moves: N`) is drawn in the
top-left corner; it counts every 5-pixel step the player takes. The game ends
when every collectible has been eaten and the player stands on the exit, or
when the window is closed.

The command exits with status 0 after a game, and with status 1 (after printing
the error) when the map is rejected or the window or images cannot be opened.

### Images

The game loads its tiles from an `img` directory in the current working
directory, so run it from a directory that holds:

```
img/space.png
img/wall.png
img/collectible.png
img/pacman.png
img/exit.png
```

Each tile is drawn at 60 x 60 pixels.

## Map files

A level is a plain text file whose name ends in `.ber`. Each line is one row
of tiles:

| Character | Meaning           |
|-----------|-------------------|
| `1`       | wall              |
| `0`       | empty floor       |
| `C`       | collectible       |
| `P`       | player start      |
| `E`       | exit              |

Example:

```
1111111111
1P0C00C001
1011110101
1C0000E001
1111111111
```

A map is rejected, with the reason (and for most checks the map itself)
printed, when:

- the command line does not name exactly one map;
- the file name does not end in `.ber`;
- the file is missing, unreadable, empty, or contains an empty line;
- it has fewer than 3 or more than 22 rows, or its first row is longer than 42 tiles;
- it has no collectible, not exactly one player, not exactly one exit, or any
  character other than those listed above;
- its rows are not all the same length;
- it is not closed in by walls on every side;
- the player cannot reach every collectible and the exit.

## Using it from Python

The modules can be used without opening a window:

- `pacmaze.maploader`: `parse_map(text)` and `read_map(path)` return the map
  rows as a list of strings, raising `MapFileError` for an empty map or an
  empty line.
- `pacmaze.mapcheck`: the individual checks (`has_map_extension`,
  `is_size_valid`, `is_rectangle`, `check_walls`, `count_component`,
  `is_component_in_map`, `validate_map_path`) return booleans or counts;
  `check_ingredients(grid)` raises `MapError`; `check_map(argv)` runs every
  check on a command line's arguments and returns the grid or raises
  `MapError` whose message is the full error report; `format_map_error(grid,
  message)` builds such a report.
- `pacmaze.game`: `new_game(grid)` builds a `GameState`. Its `try_move(move_y,
  move_x)`, `collect()`, `is_finished()`, `step(directions)` and
  `moves_text()` drive the game one frame at a time. `Box`, `small_box` and
  `Sprite` describe positions and hit boxes.
- `pacmaze.app`: `pressed_directions(keys)`, `run_game(grid, image_dir)` and
  `main(argv)`.

```python
from pacmaze.maploader import parse_map
from pacmaze.mapcheck import MapError, check_ingredients, validate_map_path
from pacmaze.game import RIGHT, new_game

with open("level.ber") as handle:
    grid = parse_map(handle.read())

try:
    check_ingredients(grid)
except MapError as error:
    print(error)

if validate_map_path(grid):
    state = new_game(grid)
    state.step([RIGHT])
    print(state.moves_text())
```

## What it does not do

The package ships no tile images; the game window needs the files listed
under *Images*. There is no sound, no score other than the move counter, and
no saving or loading of a game in progress.

## Running the tests

```
pip install .[test]
pytest
```