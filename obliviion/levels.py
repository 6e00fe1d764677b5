"""Levels: the floor, the Garden of Eden and the boss level."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Collection, Iterable, Optional, Union

import pygame

from obliviion.collisions import GerenciadorColisoes
from obliviion.collisions import get_instance as shared_collisions
from obliviion.enemies import Chefao, InimigoFraco
from obliviion.entities import Personagem
from obliviion.geometry import Rect, Sprite, Texture, Vector2, load_texture
from obliviion.lists import ListaEntidades
from obliviion.obstacles import ObstaculoDificil, Plataforma
from obliviion.player import Jogador, Key


def _rest_on(character: Personagem, surfaces: Iterable[Rect]) -> None:
    """Stop a falling character on the first surface it sinks into."""
    if character.velocity_y < 0.0:
        return
    body = character.bounds()
    for surface in surfaces:
        if body.intersects(surface):
            character.move(0.0, surface.top - body.bottom)
            character.stop_falling()
            return


def _touch(first: Personagem, second: Personagem) -> None:
    if first.bounds().intersects(second.bounds()):
        first.handle_collision(second)
        second.handle_collision(first)


class Fase(ABC):
    """A level: a background, its entities and a collision manager."""

    def __init__(self, name: str, collisions: Optional[GerenciadorColisoes] = None) -> None:
        self.name = name
        self.completed = False
        self.background = Sprite()
        self.collisions = collisions if collisions is not None else GerenciadorColisoes()
        self.pressed_keys: Collection[Key] = frozenset()

    @abstractmethod
    def load_level(self) -> None:
        """Create the level's entities."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the level by delta_time seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the level."""

    def load_background(self, path: Union[str, PathLike]) -> None:
        """Load the background image; raises TextureError on failure."""
        self.background.set_texture(load_texture(path))

    def draw_background(self, surface: pygame.Surface) -> None:
        self.background.draw(surface)


class Floor:
    """A row of tiles wide enough to cover the window."""

    def __init__(self, tile_texture: Texture, window_width: int, y_position: int) -> None:
        if tile_texture.width <= 0:
            raise ValueError("floor tile texture has no width")
        self.tile_width = tile_texture.width
        count = window_width // self.tile_width + 1
        self.tiles = [
            Sprite(tile_texture, Vector2(float(i * self.tile_width), float(y_position)))
            for i in range(count)
        ]

    def render(self, surface: pygame.Surface) -> None:
        for tile in self.tiles:
            tile.draw(surface)

    def bounds(self) -> list[Rect]:
        return [tile.global_bounds() for tile in self.tiles]


class GardenOfEden(Fase):
    """The first level: a floor, the player and weak enemies."""

    FLOOR_Y = 500
    ENEMY_COUNT = 1
    ENEMY_X = 600
    ENEMY_Y = 200
    ENEMY_SPEED = 400

    def __init__(
        self,
        name: str,
        tile_texture: Texture,
        background: Optional[Texture],
        player_texture: Texture,
        window_width: int,
        enemy_texture: Optional[Texture] = None,
        collisions: Optional[GerenciadorColisoes] = None,
    ) -> None:
        super().__init__(name, collisions)
        self.floor = Floor(tile_texture, window_width, self.FLOOR_Y)
        self.player = Jogador(player_texture)
        if background is not None:
            self.background.set_texture(background)
        self.enemy_texture = enemy_texture if enemy_texture is not None else Texture(0, 0)
        self.weak_enemies: list[InimigoFraco] = []

    def load_level(self) -> None:
        self.weak_enemies.extend(
            InimigoFraco(self.ENEMY_X, self.ENEMY_Y, self.ENEMY_SPEED, self.enemy_texture)
            for _ in range(self.ENEMY_COUNT)
        )

    def update(self, delta_time: float) -> None:
        floor = self.floor.bounds()
        self.player.update(delta_time, self.pressed_keys)
        _rest_on(self.player, floor)
        for enemy in self.weak_enemies:
            _rest_on(enemy, floor)
            enemy.update(delta_time)
            _touch(self.player, enemy)

    def render(self, surface: pygame.Surface) -> None:
        self.draw_background(surface)
        self.floor.render(surface)
        self.player.render(surface)
        for enemy in self.weak_enemies:
            enemy.render(surface)


@dataclass(frozen=True)
class FaseSegundaTextures:
    """Every texture the second level needs."""

    boss: Texture
    projectile: Texture
    hazard: Texture
    platform: Texture
    player: Texture

    @classmethod
    def from_directory(cls, images_dir: Union[str, PathLike]) -> FaseSegundaTextures:
        images = Path(images_dir)
        return cls(
            boss=load_texture(images / "chefao.png"),
            projectile=load_texture(images / "projetil.png"),
            hazard=load_texture(images / "espinhos.png"),
            platform=load_texture(images / "plataforma2.png"),
            player=load_texture(images / "player.png"),
        )


class FaseSegunda(Fase):
    """The boss level: spikes, platforms and the boss."""

    PLAYER_START = Vector2(100.0, 100.0)
    BOSS_X = 600
    BOSS_Y = 350
    HAZARD_COUNT = 5
    HAZARD_START_X = 200
    HAZARD_SPACING = 64
    HAZARD_Y = 540
    GROUND_TILES = 25
    GROUND_SPACING = 32
    GROUND_Y = 580
    FLOATING_PLATFORM_X = 400
    FLOATING_PLATFORM_Y = 450

    def __init__(
        self,
        textures: FaseSegundaTextures,
        name: str = "Fase Segunda",
        background: Optional[Texture] = None,
        collisions: Optional[GerenciadorColisoes] = None,
    ) -> None:
        super().__init__(name, collisions if collisions is not None else shared_collisions())
        self.textures = textures
        if background is not None:
            self.background.set_texture(background)
        self.obstacles = ListaEntidades()
        self.enemies = ListaEntidades()
        self.player1: Optional[Jogador] = None
        self.player2: Optional[Jogador] = None

    @classmethod
    def from_assets(
        cls,
        assets_dir: Union[str, PathLike],
        name: str = "Fase Segunda",
        collisions: Optional[GerenciadorColisoes] = None,
    ) -> FaseSegunda:
        images = Path(assets_dir) / "images"
        textures = FaseSegundaTextures.from_directory(images)
        background = load_texture(images / "background2.png")
        return cls(textures, name, background, collisions)

    @property
    def players(self) -> tuple[Jogador, ...]:
        return tuple(p for p in (self.player1, self.player2) if p is not None)

    def load_level(self) -> None:
        self.collisions.clear()
        self.obstacles.clear()
        self.enemies.clear()
        self._create_players()
        self._create_boss()
        self._create_hazards()
        self._create_platforms()
        self.collisions.set_players(self.player1, self.player2)

    def _create_players(self) -> None:
        self.player1 = Jogador(self.textures.player)
        self.player1.set_position(self.PLAYER_START.x, self.PLAYER_START.y)

    def _create_boss(self) -> None:
        boss = Chefao(self.textures.boss, self.textures.projectile, self.BOSS_X, self.BOSS_Y)
        self.enemies.add(boss)
        self.collisions.add_enemy(boss)

    def _add_obstacle(self, obstacle: Union[ObstaculoDificil, Plataforma]) -> None:
        self.obstacles.add(obstacle)
        self.collisions.add_obstacle(obstacle)

    def _create_hazards(self) -> None:
        for i in range(self.HAZARD_COUNT):
            x = self.HAZARD_START_X + i * self.HAZARD_SPACING
            self._add_obstacle(ObstaculoDificil(self.textures.hazard, x, self.HAZARD_Y))

    def _create_platforms(self) -> None:
        for i in range(self.GROUND_TILES):
            self._add_obstacle(
                Plataforma(self.textures.platform, i * self.GROUND_SPACING, self.GROUND_Y)
            )
        self._add_obstacle(
            Plataforma(
                self.textures.platform, self.FLOATING_PLATFORM_X, self.FLOATING_PLATFORM_Y
            )
        )

    def update(self, delta_time: float) -> None:
        for player in self.players:
            player.update(delta_time, self.pressed_keys)
        self.enemies.update(delta_time)
        self.obstacles.update(delta_time)
        self.collisions.run()

    def render(self, surface: pygame.Surface) -> None:
        self.draw_background(surface)
        self.obstacles.render(surface)
        self.enemies.render(surface)
        for player in self.players:
            player.render(surface)