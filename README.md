# solong

A small top-down tile puzzle. You walk a player around a rectangular map,
pick up every collectible, and then step onto the exit to win. Each move
is counted and printed to the terminal.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber`. The game opens a window titled `So_long` with one 32×32 tile per
map cell.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `A` / Left arrow   | move left  |
| `S` / Down arrow   | move down  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Walls block movement. Every step that is taken prints
`> current move : N`. Stepping onto a collectible picks it up. The exit
can be walked over while collectibles remain; stepping onto it after
taking every collectible prints `You WON !!` and ends the game. `Esc` or
closing the window prints `GAME OVER !!` and ends the game.

## Map format

A map is a plain-text file using these characters:

| Char | Meaning      |
|------|--------------|
| `0`  | empty floor  |
| `1`  | wall         |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

A map is accepted only when:

- the first line fixes the width; every line but the last ends in a
  newline, and the last line has exactly that width and no newline
  (characters past the width on an earlier line are ignored);
- only the characters above are used and the border is all walls;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- every collectible and the exit can be reached from the player's start.

Example:

```
1111111
1P0C0E1
1111111
```

A bad command line, an unreadable file, an invalid map or a map with no
valid path is reported on standard error (for example
`ERROR!` followed by `so_long: map: invalid map`) and the command exits
with status 1.

## Tiles

The window draws tiles from an `assets` directory in the current working
directory holding `wall.xpm`, `empty.xpm`, `player.xpm`,
`collectible.xpm` and `exit.xpm`. These images are not shipped with the
package. If the window cannot be opened or the images cannot be loaded,
the command reports that it failed to access the display server and
exits with status 1.

## Using it as a library

The map loading and game rules work without a window:

- `solong.mapfile.load_map(path)` reads, parses and validates a map,
  returning a `GameMap` or raising `MapError`. `parse_map(lines)`,
  `check_valid_path(game_map)`, `read_lines(path)` and
  `check_file_name(path)` are the separate steps.
- `solong.game.Game(game_map, stream=None)` holds the play state;
  `Game.move(direction)` applies a `Direction` (`UP`, `LEFT`, `DOWN`,
  `RIGHT`) and returns a `MoveResult` with `moved`, `won`, `moves` and the
  cells to `redraw`. `Game.tile_at(x, y)` gives what is shown at a cell.
- `solong.display.run(game, assets_dir="assets")` opens the window and
  plays until the game is won or closed, returning whether it was won.
  `Display` and `load_tileset` draw onto any pygame surface.

The package also holds small helper modules used by the game or usable on
their own: `solong.linereader.LineReader` (reads a file, file object or
descriptor line by line in small chunks), `solong.linkedlist.LinkedList`,
`solong.output` (writing characters, text and 32-bit numbers to a
stream), `solong.charclass` (ASCII classification, `atoi`, `itoa`),
`solong.textops` (bounded string search, copy, trim and split) and
`solong.memory` (byte-buffer search, compare, copy and fill).