"""Game state: the player's movement, collecting items and reaching the exit."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pacmaze.mapcheck import COLLECTIBLE, EXIT, PLAYER, WALL

TILE_SIZE = 60
STEP = 5
BOX_MARGIN = 15

DOWN = (STEP, 0)
UP = (-STEP, 0)
LEFT = (0, -STEP)
RIGHT = (0, STEP)


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle in pixel coordinates."""

    left_x: int
    up_y: int
    right_x: int
    down_y: int

    def contains(self, other: Box) -> bool:
        """Return True if this (player) box touches *other* closely enough to count.

        Vertically this box must lie within *other*; horizontally *other* must
        lie within this box.
        """
        return (
            self.up_y >= other.up_y
            and self.down_y <= other.down_y
            and self.left_x <= other.left_x
            and self.right_x >= other.right_x
        )


def small_box(x: int, y: int) -> Box:
    """Return the inner hit box of a tile whose top-left corner is at (x, y)."""
    return Box(
        left_x=x + BOX_MARGIN,
        up_y=y + BOX_MARGIN,
        right_x=x + TILE_SIZE - BOX_MARGIN,
        down_y=y + TILE_SIZE - BOX_MARGIN,
    )


@dataclass
class Sprite:
    """A drawable item at a pixel position that can be hidden."""

    x: int
    y: int
    enabled: bool = True

    @property
    def box(self) -> Box:
        """The sprite's hit box."""
        return small_box(self.x, self.y)


@dataclass
class GameState:
    """Everything that changes while a map is being played."""

    grid: list[str]
    player: Sprite
    exit: Sprite
    collectibles: list[Sprite] = field(default_factory=list)
    moves: int = 0
    running: bool = True

    @property
    def width(self) -> int:
        """Width of the playing field in pixels."""
        return len(self.grid[0]) * TILE_SIZE

    @property
    def height(self) -> int:
        """Height of the playing field in pixels."""
        return len(self.grid) * TILE_SIZE

    def _tile(self, y: int, x: int) -> str:
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return ""

    def try_move(self, move_y: int, move_x: int) -> bool:
        """Move the player by the given offset unless a wall is in the way.

        Returns True and counts a move if the player moved.
        """
        new_x = self.player.x + move_x
        new_y = self.player.y + move_y
        left = new_x // TILE_SIZE
        right = (new_x + TILE_SIZE - 1) // TILE_SIZE
        up = new_y // TILE_SIZE
        down = (new_y + TILE_SIZE - 1) // TILE_SIZE
        if not self._tile(up, left):
            return False
        corners = ((up, left), (down, right), (up, right), (down, left))
        if any(self._tile(y, x) == WALL for y, x in corners):
            return False
        if self._tile(up + 1, left) == WALL:
            move_y -= new_y % TILE_SIZE
        if self._tile(up, left + 1) == WALL:
            move_x -= new_x % TILE_SIZE
        self.player.x += move_x
        self.player.y += move_y
        self.moves += 1
        return True

    def is_finished(self) -> bool:
        """Return True if every item is collected and the player is on the exit."""
        if any(item.enabled for item in self.collectibles):
            return False
        return self.player.box.contains(self.exit.box)

    def collect(self) -> bool:
        """Pick up items under the player and end the game at the exit.

        Returns True while the game is still running.
        """
        player_box = self.player.box
        for item in self.collectibles:
            if player_box.contains(item.box):
                item.enabled = False
        if self.is_finished():
            self.running = False
        return self.running

    def moves_text(self) -> str:
        """Return the move counter as shown on screen."""
        return f"Moves: {self.moves}"

    def step(self, directions: Iterable[tuple[int, int]]) -> bool:
        """Apply one frame of input: each (move_y, move_x) in order, then collect.

        Returns True while the game is still running.
        """
        for move_y, move_x in directions:
            self.try_move(move_y, move_x)
        return self.collect()


def _positions(grid: Sequence[str], component: str) -> list[tuple[int, int]]:
    return [
        (x * TILE_SIZE, y * TILE_SIZE)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == component
    ]


def new_game(grid: Sequence[str]) -> GameState:
    """Create the starting state for a validated map grid."""
    players = _positions(grid, PLAYER)
    exits = _positions(grid, EXIT)
    if not players:
        raise ValueError("map has no player")
    if not exits:
        raise ValueError("map has no exit")
    return GameState(
        grid=list(grid),
        player=Sprite(*players[0]),
        exit=Sprite(*exits[0]),
        collectibles=[Sprite(x, y) for x, y in _positions(grid, COLLECTIBLE)],
    )