"""Drawing the game in a window and feeding it keyboard input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

import pygame

from solong.game import Game, direction_for_key, is_quit_key
from solong.mapfile import COLL, EXIT, MSG_DISPLAY, MSG_GAME_OVER, PLAYER, WALL
from solong.output import put_endl

TILE_SIZE = 32
WINDOW_TITLE = "So_long"
DEFAULT_ASSETS = "assets"

ASSET_FILES = {
    "wall": "wall.xpm",
    "empty": "empty.xpm",
    "player": "player.xpm",
    "collectible": "collectible.xpm",
    "exit": "exit.xpm",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: 53,
    pygame.K_w: 13,
    pygame.K_UP: 126,
    pygame.K_a: 0,
    pygame.K_LEFT: 123,
    pygame.K_s: 1,
    pygame.K_DOWN: 125,
    pygame.K_d: 2,
    pygame.K_RIGHT: 124,
}


class DisplayError(Exception):
    """The window or the images for it could not be set up."""

    def __init__(self, message: str = MSG_DISPLAY) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Tileset:
    """One image per kind of tile; ``empty`` is drawn under every cell."""

    wall: pygame.Surface
    empty: pygame.Surface
    player: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface

    def image_for(self, tile: str) -> Optional[pygame.Surface]:
        """The image drawn over the floor for ``tile``, or None for bare floor."""
        return {
            WALL: self.wall,
            PLAYER: self.player,
            COLL: self.collectible,
            EXIT: self.exit,
        }.get(tile)


def load_tileset(directory: Union[str, Path]) -> Tileset:
    """Load the tile images from ``directory``, raising DisplayError on failure."""
    base = Path(directory)
    images = {}
    for name, filename in ASSET_FILES.items():
        try:
            images[name] = pygame.image.load(str(base / filename))
        except (pygame.error, OSError) as exc:
            raise DisplayError(MSG_DISPLAY) from exc
    return Tileset(**images)


class Display:
    """Draws a game onto a surface and applies key presses to it."""

    def __init__(
        self,
        game: Game,
        tileset: Tileset,
        surface: pygame.Surface,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.game = game
        self.tileset = tileset
        self.surface = surface
        self._stream = stream

    def draw_cell(self, x: int, y: int) -> None:
        """Redraw the cell at column ``x`` of row ``y``."""
        position = (x * TILE_SIZE, y * TILE_SIZE)
        self.surface.blit(self.tileset.empty, position)
        image = self.tileset.image_for(self.game.tile_at(x, y))
        if image is not None:
            self.surface.blit(image, position)

    def draw_all(self) -> None:
        """Redraw every cell of the map."""
        for x in range(self.game.width):
            for y in range(self.game.height):
                self.draw_cell(x, y)

    def handle_key(self, key: int) -> bool:
        """Apply a key code; False once the game has ended."""
        if self.game.won:
            return False
        if is_quit_key(key):
            put_endl(MSG_GAME_OVER, self._stream)
            return False
        direction = direction_for_key(key)
        if direction is None:
            return True
        result = self.game.move(direction)
        for x, y in result.redraw:
            self.draw_cell(x, y)
        return not result.won


def run(game: Game, assets_dir: Union[str, Path] = DEFAULT_ASSETS) -> bool:
    """Open a window and play ``game`` until it is won or closed.

    Returns whether the game was won.
    """
    try:
        pygame.display.init()
        surface = pygame.display.set_mode(
            (TILE_SIZE * game.width, TILE_SIZE * game.height)
        )
    except pygame.error as exc:
        pygame.display.quit()
        raise DisplayError(MSG_DISPLAY) from exc
    try:
        pygame.display.set_caption(WINDOW_TITLE)
        display = Display(game, load_tileset(assets_dir), surface)
        display.draw_all()
        pygame.display.flip()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                put_endl(MSG_GAME_OVER)
                running = False
            elif event.type == pygame.KEYDOWN:
                code = _PYGAME_KEYS.get(event.key)
                if code is not None:
                    running = display.handle_key(code)
                    pygame.display.flip()
    finally:
        pygame.display.quit()
    return game.won