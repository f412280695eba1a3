"""Map files: naming, reading, parsing and path validation.

A map is a rectangle of tiles: ``0`` empty floor, ``1`` wall, ``C``
collectible, ``E`` exit and ``P`` the player's start.  Every row but the last
ends in a newline and the last one must not.  The border must be made of
walls.  There is exactly one player and one exit and at least one
collectible, and the player must be able to reach the exit and every
collectible.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from solong.linereader import LineReader

EMPTY = "0"
WALL = "1"
COLL = "C"
EXIT = "E"
PLAYER = "P"

TILES = frozenset({EMPTY, WALL, COLL, EXIT, PLAYER})

MAP_SUFFIX = ".ber"

MSG_USAGE = "ERROR!\nso_long: usage: ./so_long path/to/map*.ber"
MSG_OPEN = "ERROR!\nso_long"
MSG_INVALID_MAP = "ERROR!\nso_long: map: invalid map"
MSG_NO_PATH = "ERROR!\nso_long: map: no valid path"
MSG_DISPLAY = "ERROR!\nso_long failed to access display server"
MSG_ASSETS = "ERROR!\nso_long failed to access assets"
MSG_MEMORY = "ERROR!\nso_long failed to get enough memory"
MSG_GAME_OVER = "GAME OVER !!"
MSG_YOU_WON = "You WON !!"

Point = Tuple[int, int]


class MapError(Exception):
    """A map file that cannot be opened, parsed or played."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class GameMap:
    """A parsed map: its rows of tiles and where the pieces stand."""

    rows: Tuple[str, ...]
    player: Point
    exit: Point
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"({x}, {y}) lies outside the map")
        return self.rows[y][x]


def check_file_name(path: str) -> bool:
    """True when ``path`` names a map file, that is ends in ``.ber``."""
    return len(path) >= len(MAP_SUFFIX) and path.endswith(MAP_SUFFIX)


def read_lines(path: str) -> List[str]:
    """The lines of the file at ``path``, each keeping its newline."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MapError(f"{MSG_OPEN}: {exc.strerror}") from exc
    with handle:
        return list(LineReader(handle, encoding="latin-1"))


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from its lines, raising MapError when it is malformed.

    The width is fixed by the first line.  Characters of a row beyond that
    width are ignored.
    """
    lines = list(lines)
    if not lines:
        raise MapError(MSG_INVALID_MAP)
    width = len(lines[0]) - 1
    height = len(lines)
    if width < 1:
        raise MapError(MSG_INVALID_MAP)

    rows: List[str] = []
    players: List[Point] = []
    exits: List[Point] = []
    collectibles = 0
    for y, line in enumerate(lines):
        last = y == height - 1
        if (last and len(line) != width) or (not last and len(line) <= width):
            raise MapError(MSG_INVALID_MAP)
        row = line[:width]
        for x, ch in enumerate(row):
            if ch not in TILES:
                raise MapError(MSG_INVALID_MAP)
            on_border = x in (0, width - 1) or y in (0, height - 1)
            if on_border and ch != WALL:
                raise MapError(MSG_INVALID_MAP)
            if ch == PLAYER:
                players.append((x, y))
            elif ch == EXIT:
                exits.append((x, y))
            elif ch == COLL:
                collectibles += 1
        rows.append(row)

    if len(players) != 1 or len(exits) != 1 or not collectibles:
        raise MapError(MSG_INVALID_MAP)
    return GameMap(tuple(rows), players[0], exits[0], collectibles)


def _reachable_targets(game_map: GameMap) -> int:
    seen = {game_map.player}
    queue = deque([game_map.player])
    found = 0
    while queue:
        x, y = queue.popleft()
        if game_map.tile(x, y) in (COLL, EXIT):
            found += 1
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if (nx, ny) in seen:
                continue
            if not (0 <= ny < game_map.height and 0 <= nx < game_map.width):
                continue
            if game_map.tile(nx, ny) == WALL:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return found


def check_valid_path(game_map: GameMap) -> None:
    """Raise MapError unless the player can reach the exit and every collectible."""
    if _reachable_targets(game_map) - 1 != game_map.collectibles:
        raise MapError(MSG_NO_PATH)


def load_map(path: str) -> GameMap:
    """Read, parse and validate the map file at ``path``."""
    lines: Optional[List[str]] = read_lines(path)
    game_map = parse_map(lines)
    check_valid_path(game_map)
    return game_map