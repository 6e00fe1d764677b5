"""Collision detection between players, enemies and other entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from obliviion.enemies import Inimigo
    from obliviion.entities import Entidade
    from obliviion.obstacles import Obstaculo
    from obliviion.player import Jogador
    from obliviion.projectile import Projetil


class GerenciadorColisoes:
    """Tracks the entities of a level and tells colliding pairs about each other."""

    def __init__(self) -> None:
        self._player1: Optional[Jogador] = None
        self._player2: Optional[Jogador] = None
        self._enemies: list[Inimigo] = []
        self._obstacles: list[Obstaculo] = []
        self._projectiles: set[Projetil] = set()

    @property
    def players(self) -> tuple[Optional[Jogador], Optional[Jogador]]:
        return self._player1, self._player2

    @property
    def enemies(self) -> tuple[Inimigo, ...]:
        return tuple(self._enemies)

    @property
    def obstacles(self) -> tuple[Obstaculo, ...]:
        return tuple(self._obstacles)

    @property
    def projectiles(self) -> frozenset[Projetil]:
        return frozenset(self._projectiles)

    def set_players(
        self, player1: Optional[Jogador], player2: Optional[Jogador] = None
    ) -> None:
        self._player1 = player1
        self._player2 = player2

    def add_enemy(self, enemy: Optional[Inimigo]) -> None:
        if enemy is not None:
            self._enemies.append(enemy)

    def add_obstacle(self, obstacle: Optional[Obstaculo]) -> None:
        if obstacle is not None:
            self._obstacles.append(obstacle)

    def add_projectile(self, projectile: Optional[Projetil]) -> None:
        if projectile is not None:
            self._projectiles.add(projectile)

    @staticmethod
    def _collide(first: Optional[Entidade], second: Optional[Entidade]) -> bool:
        if first is None or second is None:
            return False
        return first.bounds().intersects(second.bounds())

    def _players_vs_enemies(self) -> None:
        for enemy in self._enemies:
            for player in (self._player1, self._player2):
                if player is not None and self._collide(player, enemy):
                    player.handle_collision(enemy)
                    enemy.handle_collision(player)

    def _players_vs_players(self) -> None:
        first, second = self._player1, self._player2
        if first is not None and second is not None and self._collide(first, second):
            first.handle_collision(second)
            second.handle_collision(first)

    def run(self) -> None:
        """Check every tracked pair once and notify the ones that touch."""
        self._players_vs_enemies()
        self._players_vs_players()

    def clear(self) -> None:
        """Forget every tracked entity."""
        self._player1 = None
        self._player2 = None
        self._enemies.clear()
        self._obstacles.clear()
        self._projectiles.clear()


_instance: Optional[GerenciadorColisoes] = None


def get_instance() -> GerenciadorColisoes:
    """Return the shared collision manager, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = GerenciadorColisoes()
    return _instance