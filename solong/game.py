"""Game state and player movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Tuple

from solong.mapfile import COLL, EMPTY, EXIT, MSG_YOU_WON, PLAYER, WALL, GameMap
from solong.output import put_char, put_endl, put_nbr, put_str

Point = Tuple[int, int]

QUIT_KEY = 53


class Direction(Enum):
    """A step of one cell, as (dx, dy)."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    13: Direction.UP,
    126: Direction.UP,
    0: Direction.LEFT,
    123: Direction.LEFT,
    1: Direction.DOWN,
    125: Direction.DOWN,
    2: Direction.RIGHT,
    124: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    """The direction a key code moves the player in, or None."""
    return _KEY_DIRECTIONS.get(key)


def is_quit_key(key: int) -> bool:
    """True for the key code that ends the game."""
    return key == QUIT_KEY


@dataclass(frozen=True)
class MoveResult:
    """What one move did: whether the player moved, whether it won, and
    which cells need redrawing."""

    moved: bool
    won: bool
    moves: int
    redraw: Tuple[Point, ...] = ()


class Game:
    """A game in progress on a parsed map.

    Each counted move is reported on ``stream`` (standard output by default),
    as is the winning message.
    """

    def __init__(self, game_map: GameMap, stream: Optional[TextIO] = None) -> None:
        self._grid = [list(row) for row in game_map.rows]
        px, py = game_map.player
        self._grid[py][px] = EMPTY
        self.player: Point = game_map.player
        self.exit: Point = game_map.exit
        self.collectibles = game_map.collectibles
        self.moves = 0
        self.won = False
        self._stream = stream

    @property
    def width(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    @property
    def height(self) -> int:
        return len(self._grid)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def tile_at(self, x: int, y: int) -> str:
        """The tile shown at ``(x, y)``, the player included."""
        if not self._inside(x, y):
            raise IndexError(f"({x}, {y}) lies outside the map")
        if (x, y) == self.player:
            return PLAYER
        return self._grid[y][x]

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one cell in ``direction``."""
        if self.won:
            raise RuntimeError("the game is already won")
        x, y = self.player
        tx, ty = x + direction.dx, y + direction.dy
        if not self._inside(tx, ty) or self._grid[ty][tx] == WALL:
            return MoveResult(moved=False, won=False, moves=self.moves)
        old = self.player
        target = (tx, ty)
        cell = self._grid[ty][tx]
        if cell == EXIT and not self.collectibles:
            self.player = target
            self.won = True
            put_endl(MSG_YOU_WON, self._stream)
            return MoveResult(True, True, self.moves, (old, target))
        if cell == COLL:
            self._grid[ty][tx] = EMPTY
            self.collectibles -= 1
        self.player = target
        self.moves += 1
        put_str("> current move : ", self._stream)
        put_nbr(self.moves, self._stream)
        put_char("\n", self._stream)
        return MoveResult(True, False, self.moves, (old, target))