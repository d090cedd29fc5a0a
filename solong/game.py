"""Game state, player movement and the timed effects of the bonus mode."""

from dataclasses import dataclass, field
from enum import Enum

from .console import print_formatted
from .validate import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, InvalidMapError

KEY_ESC = 65307
KEY_Q = 113

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100

KEY_UP = 65362
KEY_LEFT = 65361
KEY_DOWN = 65364
KEY_RIGHT = 65363

QUIT_KEYS = frozenset((KEY_ESC, KEY_Q))


class Direction(Enum):
    """A step on the grid as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def dy(self):
        return self.value[0]

    @property
    def dx(self):
        return self.value[1]


_KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
}


def direction_for_key(keycode):
    """Return the Direction bound to ``keycode``, or None for other keys."""
    return _KEY_DIRECTIONS.get(keycode)


class MoveResult(Enum):
    """What happened when the player tried to move."""

    MOVED = "moved"
    COLLECTED = "collected"
    BLOCKED = "blocked"
    WON = "won"
    DIED = "died"
    IGNORED = "ignored"


@dataclass(eq=False)
class Game:
    """A running game on a mutable grid of tiles."""

    grid: list
    bonus: bool = False
    moves: int = 0
    ended: bool = False
    dead: bool = False
    facing: Direction = Direction.RIGHT
    collectibles: int = field(init=False)
    player: tuple = field(init=False)

    def __post_init__(self):
        self.grid = [list(row) for row in self.grid]
        self.collectibles = sum(row.count(COLLECTIBLE) for row in self.grid)
        self.player = self._locate_player()

    def _locate_player(self):
        for y, row in enumerate(self.grid):
            if PLAYER in row:
                return (y, row.index(PLAYER))
        raise InvalidMapError("map has no player")

    def _tile(self, y, x):
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return WALL

    def exit_open(self):
        """Return True once every collectible has been taken."""
        return self.collectibles == 0

    def move(self, direction):
        """Try to move the player one step and report the outcome."""
        if self.ended:
            return MoveResult.IGNORED
        self.facing = (
            Direction.RIGHT
            if direction in (Direction.UP, Direction.RIGHT)
            else Direction.LEFT
        )
        y, x = self.player
        ty, tx = y + direction.dy, x + direction.dx
        target = self._tile(ty, tx)

        if target == EXIT and self.exit_open():
            self.grid[y][x] = FLOOR
            self.moves += 1
            self.ended = True
            self.player = (ty, tx)
            return MoveResult.WON
        if self.bonus and target == ENEMY:
            self.ended = True
            self.dead = True
            return MoveResult.DIED
        if target in (WALL, EXIT):
            return MoveResult.BLOCKED

        collected = target == COLLECTIBLE
        if collected:
            self.collectibles -= 1
        self.grid[ty][tx] = PLAYER
        self.grid[y][x] = FLOOR
        self.moves += 1
        self.player = (ty, tx)
        return MoveResult.COLLECTED if collected else MoveResult.MOVED


@dataclass
class EnemyAnimation:
    """Cycles the enemy sprite through its frames every ``period`` ticks."""

    FRAMES = 4

    period: int = 10000
    loop: int = 0
    position: int = 1
    frame: int = 1

    def tick(self):
        """Advance one tick; return True when the displayed frame was updated."""
        if self.loop < self.period:
            self.loop += 1
            return False
        self.loop = 0
        self.frame = self.position
        self.position = self.position % self.FRAMES + 1
        return True


@dataclass
class TombstoneTimer:
    """Counts down after the player dies, announcing the seconds left."""

    seconds: int = 4
    step: int = 57143
    limit: int = 228572
    counter: int = 0
    finished: bool = False

    def tick(self):
        """Advance one tick.

        Returns the number of seconds announced on this tick, or None.
        Sets ``finished`` once the countdown has run out.
        """
        if self.counter >= self.limit:
            self.finished = True
            return None
        announced = None
        if self.counter % self.step == 0:
            announced = self.seconds
            print_formatted("Tempo restante: ")
            print_formatted("\033[0;34m%d\033[0m", announced)
            print_formatted(" segundos\n")
            self.seconds -= 1
        self.counter += 1
        return announced