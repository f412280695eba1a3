"""Command-line entry point: load a map and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.display import DEFAULT_ASSETS, DisplayError, run
from solong.game import Game
from solong.mapfile import MSG_USAGE, MapError, check_file_name, load_map
from solong.output import put_endl


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_file_name(args[0]):
        put_endl(MSG_USAGE, sys.stderr)
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        put_endl(exc.message, sys.stderr)
        return 1
    try:
        run(Game(game_map), DEFAULT_ASSETS)
    except DisplayError as exc:
        put_endl(exc.message, sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())