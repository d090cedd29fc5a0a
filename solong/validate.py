"""Validation of map grids: shape, walls, tile counts and reachability."""

from dataclasses import dataclass

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "K"

BASE_TILES = frozenset((WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE))
BONUS_TILES = BASE_TILES | {ENEMY}


class InvalidMapError(ValueError):
    """Raised when a map grid fails validation."""


@dataclass(frozen=True)
class MapCounts:
    """How many players, exits and collectibles a map holds."""

    players: int = 0
    exits: int = 0
    collectibles: int = 0


def is_rectangular(grid):
    """Return True when every row is as long as the first one."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid[1:])


def is_walled(grid):
    """Return True when the map is enclosed by wall tiles."""
    if not grid:
        return False
    top, bottom = grid[0], grid[-1]
    if any(a != WALL or b != WALL for a, b in zip(top, bottom)):
        return False
    if len(grid) < 2:
        return True
    width = len(grid[1])
    for row in grid[1:]:
        if row[:1] != WALL or row[width - 1 : width] != WALL:
            return False
    return True


def count_tiles(grid):
    """Count the players, exits and collectibles in the grid."""
    players = exits = collectibles = 0
    for row in grid:
        players += row.count(PLAYER)
        exits += row.count(EXIT)
        collectibles += row.count(COLLECTIBLE)
    return MapCounts(players=players, exits=exits, collectibles=collectibles)


def has_valid_tiles(grid, allowed):
    """Return True when every tile of the grid is one of ``allowed``."""
    allowed = set(allowed)
    return all(tile in allowed for row in grid for tile in row)


def find_player(grid):
    """Return the (row, column) of the first player tile, or None."""
    for y, row in enumerate(grid):
        x = row.find(PLAYER)
        if x >= 0:
            return (y, x)
    return None


def flood_fill(grid, start):
    """Return the set of (row, column) cells reachable from ``start``.

    Movement is orthogonal and only wall tiles block it; the grid is
    left untouched.
    """
    seen = set()
    stack = [start]
    while stack:
        y, x = stack.pop()
        if (y, x) in seen:
            continue
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        if grid[y][x] == WALL:
            continue
        seen.add((y, x))
        stack.extend(((y, x - 1), (y, x + 1), (y - 1, x), (y + 1, x)))
    return seen


def _reachable_tiles(grid):
    start = find_player(grid)
    if start is None:
        return None
    return [grid[y][x] for y, x in flood_fill(grid, start)]


def exit_reachable(grid):
    """Return True when the player can reach at least one exit."""
    tiles = _reachable_tiles(grid)
    return tiles is not None and EXIT in tiles


def collectibles_reachable(grid, n_collectibles):
    """Return True when the player can reach ``n_collectibles`` collectibles."""
    tiles = _reachable_tiles(grid)
    if tiles is None:
        return False
    reached = tiles.count(COLLECTIBLE)
    return reached > 0 and reached >= n_collectibles


def check_map(grid, bonus=False):
    """Validate ``grid`` and return its tile counts.

    With ``bonus`` set, enemy tiles are allowed. Raises InvalidMapError
    describing the first rule the map breaks.
    """
    if not grid:
        raise InvalidMapError("map is empty")
    if not is_rectangular(grid):
        raise InvalidMapError("map is not rectangular")
    if not is_walled(grid):
        raise InvalidMapError("map is not surrounded by walls")
    counts = count_tiles(grid)
    if counts.players != 1 or counts.exits == 0 or counts.collectibles == 0:
        raise InvalidMapError(
            "map needs one player, at least one exit and one collectible"
        )
    if not has_valid_tiles(grid, BONUS_TILES if bonus else BASE_TILES):
        raise InvalidMapError("map contains unknown tiles")
    if not exit_reachable(grid):
        raise InvalidMapError("exit cannot be reached")
    if not collectibles_reachable(grid, counts.collectibles):
        raise InvalidMapError("not every collectible can be reached")
    return counts