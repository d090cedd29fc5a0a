"""Drawing the game with pygame and running its event loop."""

import os

import pygame

from .console import itoa, print_colored, print_formatted
from .game import (
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    QUIT_KEYS,
    Direction,
    EnemyAnimation,
    MoveResult,
    TombstoneTimer,
    direction_for_key,
)
from .validate import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL

TILE = 32
DEFAULT_ASSET_DIR = os.path.join("assets", "images")
WINDOW_TITLE = "so_long"

GREEN = "\033[0;32m"
RED = "\033[0;31m"

TEXT_WHITE = (0xFF, 0xFF, 0xFF)
TEXT_BLUE = (0x00, 0x00, 0xFF)
MOVES_LABEL = "Movimentos: "
MOVES_LABEL_POS = (25, 20)
MOVES_VALUE_POS = (100, 20)
FONT_SIZE = 16

FPS = 60
# The tombstone countdown announces one second every this many ticks.
TICKS_PER_SECOND = 57143

BASE_SPRITES = ("0", "1", "PD", "PA", "C", "E1", "E2")
BONUS_SPRITES = ("EN1", "EN2", "EN3", "EN4", "T")

_PYGAME_KEYSYMS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def _keysym(key):
    return _PYGAME_KEYSYMS.get(key, key)


def _load_sprites(asset_dir, names):
    sprites = {}
    for name in names:
        path = os.path.join(asset_dir, f"{name}.xpm")
        if not os.path.isfile(path):
            raise FileNotFoundError(f"missing image: {path}")
        sprites[name] = pygame.image.load(path)
    return sprites


class Renderer:
    """Draws a Game onto a pygame surface, one 32-pixel tile per cell."""

    def __init__(self, game, sprites=None, asset_dir=DEFAULT_ASSET_DIR, animation=None):
        self.game = game
        self.animation = animation
        needed = BASE_SPRITES + (BONUS_SPRITES if game.bonus else ())
        if sprites is None:
            sprites = _load_sprites(asset_dir, needed)
        missing = [name for name in needed if name not in sprites]
        if missing:
            raise ValueError(f"missing sprites: {', '.join(missing)}")
        self.sprites = dict(sprites)
        self._font = None

    @property
    def top(self):
        """Vertical offset of the map; the bonus mode keeps a header row."""
        return TILE if self.game.bonus else 0

    def window_size(self):
        """Return the (width, height) in pixels the window needs."""
        grid = self.game.grid
        return (len(grid[0]) * TILE, len(grid) * TILE + self.top)

    def _player_sprite(self):
        if self.game.bonus and self.game.dead:
            return self.sprites["T"]
        return self.sprites["PD" if self.game.facing is Direction.RIGHT else "PA"]

    def _enemy_sprite(self):
        frame = self.animation.frame if self.animation is not None else 1
        return self.sprites[f"EN{frame}"]

    def _sprite_for(self, tile):
        if tile == WALL:
            return self.sprites["1"]
        if tile == FLOOR:
            return self.sprites["0"]
        if tile == PLAYER:
            return self._player_sprite()
        if tile == COLLECTIBLE:
            return self.sprites["C"]
        if tile == EXIT:
            return self.sprites["E2" if self.game.exit_open() else "E1"]
        if tile == ENEMY and self.game.bonus:
            return self._enemy_sprite()
        return None

    def _draw_moves(self, surface):
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE)
        ascent = self._font.get_ascent()
        for text, colour, (x, y) in (
            (MOVES_LABEL, TEXT_WHITE, MOVES_LABEL_POS),
            (itoa(self.game.moves), TEXT_BLUE, MOVES_VALUE_POS),
        ):
            rendered = self._font.render(text, True, colour)
            # Positions name the text baseline.
            surface.blit(rendered, (x, y - ascent))

    def draw(self, surface):
        """Clear ``surface`` and draw the whole map, plus the move count in bonus mode."""
        surface.fill((0, 0, 0))
        top = self.top
        for y, row in enumerate(self.game.grid):
            for x, tile in enumerate(row):
                sprite = self._sprite_for(tile)
                if sprite is not None:
                    surface.blit(sprite, (x * TILE, y * TILE + top))
        if self.game.bonus:
            self._draw_moves(surface)


def _finish():
    print_colored(RED, "Jogo Terminado!\n")
    return 0


def run(game, asset_dir=DEFAULT_ASSET_DIR):
    """Open a window and play ``game`` until it ends; return the exit status."""
    print_colored(GREEN, "Jogo Iniciado!\n")
    pygame.init()
    try:
        animation = EnemyAnimation() if game.bonus else None
        renderer = Renderer(game, asset_dir=asset_dir, animation=animation)
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        timer = None
        renderer.draw(screen)
        pygame.display.flip()
        while True:
            elapsed = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return _finish()
                if event.type != pygame.KEYDOWN:
                    continue
                keysym = _keysym(event.key)
                if keysym in QUIT_KEYS:
                    return _finish()
                if game.ended:
                    continue
                direction = direction_for_key(keysym)
                result = game.move(direction) if direction is not None else None
                if result is MoveResult.WON:
                    renderer.draw(screen)
                    pygame.display.flip()
                    return _finish()
                if result is MoveResult.DIED:
                    timer = TombstoneTimer()
                if not game.bonus:
                    print_formatted("Movimentos: \033[0;34m%d\033[0m\n", game.moves)
            ticks = elapsed * TICKS_PER_SECOND // 1000
            if timer is not None:
                for _ in range(ticks):
                    timer.tick()
                    if timer.finished:
                        return _finish()
            elif animation is not None:
                for _ in range(ticks):
                    animation.tick()
            renderer.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()