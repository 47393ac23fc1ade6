"""The game window: input, drawing and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pygame

from pacmaze.game import DOWN, LEFT, RIGHT, TILE_SIZE, UP, GameState, new_game
from pacmaze.mapcheck import COLLECTIBLE, EXIT, PLAYER, SPACE, WALL, MapError, check_map

FPS = 60
WINDOW_TITLE = "pacmaze"
DEFAULT_IMAGE_DIR = "./img"
FONT_SIZE = 24
TEXT_COLOUR = (255, 255, 255)

IMAGE_FILES = {
    SPACE: "space.png",
    WALL: "wall.png",
    COLLECTIBLE: "collectible.png",
    PLAYER: "pacman.png",
    EXIT: "exit.png",
}

_DIRECTION_KEYS = (
    (pygame.K_s, DOWN),
    (pygame.K_w, UP),
    (pygame.K_a, LEFT),
    (pygame.K_d, RIGHT),
)


def _is_down(keys: Any, key: int) -> bool:
    try:
        return bool(keys[key])
    except (KeyError, IndexError):
        return False


def pressed_directions(keys: Any) -> list[tuple[int, int]]:
    """Return the moves for the held direction keys, in the order S, W, A, D.

    *keys* is anything indexed by key code, such as the result of
    ``pygame.key.get_pressed()`` or a mapping; missing codes count as released.
    """
    return [direction for key, direction in _DIRECTION_KEYS if _is_down(keys, key)]


def _load_images(image_dir: Path) -> dict[str, pygame.Surface]:
    return {
        component: pygame.image.load(str(image_dir / name)).convert_alpha()
        for component, name in IMAGE_FILES.items()
    }


def _draw(
    screen: pygame.Surface,
    state: GameState,
    images: dict[str, pygame.Surface],
    font: pygame.font.Font,
) -> None:
    for y, row in enumerate(state.grid):
        for x in range(len(row)):
            screen.blit(images[SPACE], (x * TILE_SIZE, y * TILE_SIZE))
    for y, row in enumerate(state.grid):
        for x, cell in enumerate(row):
            if cell == WALL:
                screen.blit(images[WALL], (x * TILE_SIZE, y * TILE_SIZE))
    for item in state.collectibles:
        if item.enabled:
            screen.blit(images[COLLECTIBLE], (item.x, item.y))
    screen.blit(images[EXIT], (state.exit.x, state.exit.y))
    screen.blit(images[PLAYER], (state.player.x, state.player.y))
    screen.blit(font.render(state.moves_text(), True, TEXT_COLOUR), (0, 0))


def run_game(grid: Sequence[str], image_dir: str | Path) -> GameState:
    """Open a window and play *grid* until it is won or closed.

    Images are loaded from *image_dir*. Returns the final game state; raises
    ``pygame.error`` or ``OSError`` if the window or images are unavailable.
    """
    state = new_game(grid)
    pygame.init()
    try:
        screen = pygame.display.set_mode((state.width, state.height))
        pygame.display.set_caption(WINDOW_TITLE)
        images = _load_images(Path(image_dir))
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        while state.running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                state.running = False
                break
            keys = pygame.key.get_pressed()
            if _is_down(keys, pygame.K_ESCAPE):
                state.running = False
            state.step(pressed_directions(keys))
            _draw(screen, state, images, font)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return state


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the map named on the command line and play it."""
    if argv is None:
        argv = sys.argv
    try:
        grid = check_map(argv)
    except MapError as error:
        print(str(error), end="")
        return 1
    try:
        run_game(grid, DEFAULT_IMAGE_DIR)
    except (pygame.error, OSError) as error:
        print(f"Error\n{error}\n", end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())