"""Validation of map files and grids before a game starts."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Union

from pacmaze.maploader import MapFileError, read_map

PathLike = Union[str, "os.PathLike[str]"]

RED = "\x01\033[1;31m\x02"

MAP_EXTENSION = ".ber"
MIN_ROWS = 3
MAX_ROWS = 22
MAX_COLUMNS = 42

WALL = "1"
SPACE = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"
VALID_COMPONENTS = frozenset({SPACE, WALL, COLLECTIBLE, PLAYER, EXIT})


class MapError(Exception):
    """Raised when a map is rejected; the message is the full error report."""


def has_map_extension(path: PathLike) -> bool:
    """Return True if *path* ends with the map file extension."""
    return os.fspath(path).endswith(MAP_EXTENSION)


def is_size_valid(grid: Sequence[str]) -> bool:
    """Return True if the grid has an accepted number of rows and columns."""
    if not MIN_ROWS <= len(grid) <= MAX_ROWS:
        return False
    return len(grid[0]) <= MAX_COLUMNS


def is_rectangle(grid: Sequence[str]) -> bool:
    """Return True if every row is as long as the first one."""
    width = len(grid[0])
    return all(len(row) == width for row in grid[1:])


def check_walls(grid: Sequence[str]) -> bool:
    """Return True if the grid is enclosed by walls.

    The grid is expected to be a rectangle.
    """
    width = len(grid[0])
    border = WALL * width
    if grid[0] != border or grid[-1][:width] != border:
        return False
    return all(row[0] == WALL and row[width - 1] == WALL for row in grid[:-1])


def count_component(grid: Sequence[str], component: str) -> int:
    """Count *component* in every row but the first.

    The first row is always a wall row in a valid map, so it is not scanned.
    """
    return sum(row.count(component) for row in grid[1:])


def is_component_in_map(grid: Sequence[str], component: str) -> bool:
    """Return True if *component* appears anywhere in the grid."""
    return any(component in row for row in grid)


def check_ingredients(grid: Sequence[str]) -> None:
    """Check the number of collectibles, players and exits and the characters used.

    Raises MapError naming the first problem found.
    """
    if count_component(grid, COLLECTIBLE) < 1:
        raise MapError(f"{RED}Error\nLESS THEN 1 COLLECTIBLE.\n")
    if count_component(grid, PLAYER) != 1:
        raise MapError(f"{RED}Error\nMORE  OR LESS THEN 1 PLAYER.\n")
    if count_component(grid, EXIT) != 1:
        raise MapError(f"{RED}Error\nMORE ORE LESS THEN 1 EXIT.\n")
    if any(set(row) - VALID_COMPONENTS for row in grid):
        raise MapError(f"{RED}Error\nINVALIDE INGREDIENTS.\n")


def _player_position(grid: Sequence[str]) -> tuple[int, int] | None:
    for y, row in enumerate(grid):
        x = row.find(PLAYER)
        if x >= 0:
            return y, x
    return None


def validate_map_path(grid: Sequence[str]) -> bool:
    """Return True if the player can reach every collectible and the exit."""
    start = _player_position(grid)
    if start is None:
        return False
    cells = [list(row) for row in grid]
    stack = [start]
    while stack:
        y, x = stack.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        if cells[y][x] in (WALL, "F"):
            continue
        cells[y][x] = "F"
        stack.extend(((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)))
    flooded = ["".join(row) for row in cells]
    return not (
        is_component_in_map(flooded, COLLECTIBLE) or is_component_in_map(flooded, EXIT)
    )


def format_map_error(grid: Sequence[str], message: str) -> str:
    """Return an error report showing the map followed by *message*."""
    rows = "".join(f"{row}\n" for row in grid)
    return f"\n{RED}{rows}\nError\n{message}\n"


def check_map(argv: Sequence[str]) -> list[str]:
    """Load and validate the map named by ``argv[1]``.

    *argv* holds the program name and exactly one map path. Returns the
    grid's rows; raises MapError with the full report otherwise.
    """
    if len(argv) != 2:
        raise MapError(f"{RED}Error\n!= 2 arguments.\n")
    path = argv[1]
    if not has_map_extension(path):
        raise MapError(f"\n{RED}Error\nWRONG FILETYPE!\n")
    try:
        grid = read_map(path)
    except MapFileError as error:
        raise MapError(f"{RED}Error\nMAP ISN'T VALID!\n") from error
    if not is_size_valid(grid):
        raise MapError(format_map_error(grid, "INVALID DIMENIONS"))
    try:
        check_ingredients(grid)
    except MapError as error:
        raise MapError(f"{error}{RED}NOT ALL INGREDIENTS IN MAP.\n") from error
    if not is_rectangle(grid):
        raise MapError(format_map_error(grid, "MAP ISN'T A RECTANGEL.!\n"))
    if not check_walls(grid):
        raise MapError(format_map_error(grid, "WALLS ARE NOT PROPER SET!\n"))
    if not validate_map_path(grid):
        raise MapError(format_map_error(grid, "MAP PATH IS NOT VALIDE."))
    return grid