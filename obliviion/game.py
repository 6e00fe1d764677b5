"""The game loop and the command that starts it."""

from __future__ import annotations

import argparse
import sys
import time
from os import PathLike
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import pygame

from obliviion.geometry import Texture, TextureError, load_texture
from obliviion.graphics import GerenciadorGrafico
from obliviion.levels import GardenOfEden
from obliviion.menu import Menu
from obliviion.player import Key

DEFAULT_ASSETS = Path("..") / "assets"

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _pressed_keys() -> frozenset[Key]:
    state = pygame.key.get_pressed()
    return frozenset(key for code, key in _KEYS.items() if state[code])


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, pygame.error) as exc:
        raise OSError(f"Failed to load font: {path}") from exc


def _load_optional(path: Path) -> Optional[Texture]:
    try:
        return load_texture(path)
    except TextureError as exc:
        print(exc, file=sys.stderr)
        return None


class Game:
    """Owns the window, the current level and the pause menu."""

    MENU_ITEMS = ("Resume", "Option", "Sair")
    FONT_SIZE = 32
    LEVEL_NAME = "Garden of Eden"
    LEVEL_WIDTH = 1000
    MIN_DELTA = 1.0 / 144.0

    def __init__(
        self,
        assets_dir: Union[str, PathLike] = DEFAULT_ASSETS,
        graphics: Optional[GerenciadorGrafico] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        assets = Path(assets_dir)
        images = assets / "images"
        pygame.font.init()
        font = _load_font(assets / "fonts" / "arial.ttf", self.FONT_SIZE)
        self.menu = Menu(self.MENU_ITEMS, font)
        player_texture = load_texture(images / "player.png")
        tile_texture = load_texture(images / "tile1.png")
        self.level = GardenOfEden(
            self.LEVEL_NAME,
            tile_texture,
            _load_optional(images / "background1.png"),
            player_texture,
            self.LEVEL_WIDTH,
            _load_optional(images / "inimigoFraco.png"),
        )
        self.level.load_level()
        self.graphics = graphics if graphics is not None else GerenciadorGrafico()
        self._clock = clock
        self._last_tick = clock()

    def run(self) -> None:
        """Process events, update and draw until the window closes."""
        while self.graphics.is_open():
            self.process_events()
            if not self.graphics.is_open():
                break
            self.update()
            self.render()

    def process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.graphics.close()
            if event.type != pygame.KEYDOWN:
                continue
            key = _KEYS.get(event.key)
            if key is Key.ESCAPE:
                if self.menu.is_open:
                    self.menu.close()
                else:
                    self.menu.open()
            if self.menu.is_open and key is not None:
                if self.menu.handle_key(key) == Menu.QUIT_ITEM:
                    self.graphics.close()

    def update(self) -> None:
        """Advance the level unless the game is paused by the menu."""
        if self.menu.is_open:
            return
        now = self._clock()
        delta_time = max(now - self._last_tick, self.MIN_DELTA)
        self._last_tick = now
        self.level.pressed_keys = _pressed_keys()
        self.level.update(delta_time)

    def render(self) -> None:
        if not self.graphics.is_open():
            return
        self.graphics.clear()
        surface = self.graphics.window
        self.level.render(surface)
        self.menu.render(surface)
        self.graphics.display()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="obliviion", description="Play Obliviion.")
    parser.add_argument(
        "--assets", type=Path, default=DEFAULT_ASSETS, help="directory holding game assets"
    )
    args = parser.parse_args(argv)
    try:
        try:
            game = Game(args.assets)
        except OSError as exc:
            print(exc, file=sys.stderr)
            return 1
        game.run()
    finally:
        pygame.quit()
    return 0