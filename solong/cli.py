"""Command line entry point: validate a map file and start the game."""

import sys

from .console import print_colored, print_formatted
from .game import Game
from .mapfile import read_map
from .render import DEFAULT_ASSET_DIR, RED, run
from .validate import InvalidMapError, check_map

MAP_EXTENSION = ".ber"
BONUS_FLAG = "--bonus"


def has_map_extension(path):
    """Return True when ``path`` ends in the map extension."""
    return bool(path) and path.endswith(MAP_EXTENSION)


def error_message(text):
    """Print the error banner followed by ``text``."""
    print_colored(RED, "Erro!\n")
    print_formatted(text)


def _load_valid_map(path, bonus):
    try:
        grid = read_map(path)
    except OSError:
        return None
    try:
        check_map(grid, bonus)
    except InvalidMapError:
        return None
    if not has_map_extension(path):
        return None
    return grid


def main(argv=None):
    """Run the game on the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    if len(args) != 1:
        error_message("Argumentos Inválidos.\n")
        return 1
    path = args[0]
    grid = _load_valid_map(path, bonus)
    if grid is None:
        error_message("Mapa Inválido.\n")
        return 1
    return run(Game(grid, bonus=bonus), DEFAULT_ASSET_DIR)


if __name__ == "__main__":
    raise SystemExit(main())