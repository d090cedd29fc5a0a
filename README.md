# solong

A small top-down tile puzzle game built on pygame. You walk a character
around a walled map, pick up every collectible, and then step onto the exit.
Every step is counted.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Playing

    solong path/to/level.ber
    solong --bonus path/to/level.ber

The map file must have the `.ber` extension. `--bonus` turns on the bonus
mode, which allows enemies on the map and shows the move count inside the
window.

If the number of arguments is wrong, the game prints `Erro!` followed by
`Argumentos Inválidos.` and exits with status 1. If the map cannot be read,
breaks one of the rules below, or the file name lacks the `.ber` extension,
it prints `Erro!` followed by `Mapa Inválido.` and exits with status 1.
The terminal shows `Jogo Iniciado!` when the window opens and
`Jogo Terminado!` when the game ends.

Controls:

- `W` / `↑`, `A` / `←`, `S` / `↓`, `D` / `→` move the player
- `Esc` or `Q` quits, as does closing the window

The exit opens once every collectible has been picked up; walking into it
then ends the game. A closed exit blocks the player like a wall. In the
normal mode the move count is printed to the terminal after each key press.
In the bonus mode the map may also hold enemies, whose sprite cycles
through four frames; walking into one leaves a tombstone and starts a
countdown printed to the terminal, after which the game closes.

## Images

The game draws with 32×32 pixel sprites loaded from `assets/images/`,
relative to the directory it is started from. It needs these files:

- always: `0.xpm` (floor), `1.xpm` (wall), `PD.xpm` and `PA.xpm` (player
  facing right and left), `C.xpm` (collectible), `E1.xpm` and `E2.xpm`
  (closed and open exit)
- in the bonus mode also: `EN1.xpm` to `EN4.xpm` (enemy frames) and
  `T.xpm` (tombstone)

A missing file stops the game with `FileNotFoundError`.

## Map format

A map is a rectangle of text lines made of these tiles:

| Tile | Meaning                      |
|------|------------------------------|
| `1`  | wall                         |
| `0`  | empty floor                  |
| `P`  | player start (exactly one)   |
| `E`  | exit (at least one)          |
| `C`  | collectible (at least one)   |
| `K`  | enemy (bonus mode only)      |

Empty lines are ignored. The map must be fully surrounded by walls, and the
player must be able to reach an exit and every collectible. For example:

    1111111111
    1P00C00001
    1011110101
    1C000000E1
    1111111111

## Using it as a library

- `solong.mapfile.read_map(path)` loads a map as a list of row strings and
  raises `OSError` when the file cannot be opened.
- `solong.validate.check_map(grid, bonus=False)` checks a map, returns a
  `MapCounts` (players, exits, collectibles) and raises
  `solong.validate.InvalidMapError` naming the first rule the map breaks.
  The individual checks (`is_rectangular`, `is_walled`, `count_tiles`,
  `has_valid_tiles`, `find_player`, `flood_fill`, `exit_reachable`,
  `collectibles_reachable`) are available too.
- `solong.game.Game(grid, bonus=False)` holds the game state.
  `Game.move(direction)` takes a `solong.game.Direction` and returns a
  `solong.game.MoveResult` (`MOVED`, `COLLECTED`, `BLOCKED`, `WON`, `DIED`
  or `IGNORED` once the game has ended); `Game.exit_open()` tells whether
  every collectible has been taken. `direction_for_key(keycode)` maps key
  codes to directions. `EnemyAnimation` and `TombstoneTimer` drive the
  bonus mode's timed effects through their `tick()` methods.
- `solong.render.Renderer(game, sprites=None, asset_dir=..., animation=None)`
  draws a game onto a pygame surface with `draw(surface)`;
  `window_size()` gives the pixel size it needs.
  `solong.render.run(game, asset_dir)` opens a window, plays the game and
  returns the exit status.
- `solong.console` has the small printf-style formatter used for terminal
  output (`format_printf`, `print_formatted`, `print_colored`, `itoa`), and
  `solong.lines` the line reader and splitting helpers (`iter_lines`,
  `split_fields`, `substring`).

## What it does not include

The package ships no sprite images and no level files; both must be
provided as described above before the game can be played.