"""Enemy characters, from weak walkers to the projectile-firing boss."""

from __future__ import annotations

import time
from abc import abstractmethod
from typing import Any, Callable, Optional

import pygame

from obliviion.entities import Entidade, Personagem
from obliviion.geometry import Texture, Vector2
from obliviion.player import Jogador
from obliviion.projectile import Projetil


class Inimigo(Personagem):
    """A hostile character with an evil level."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        speed: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(x, y, speed, clock)
        self.evil_level = 0
        self.strength = 0
        self.last_collision: Optional[Entidade] = None

    @abstractmethod
    def damage(self, player: Jogador) -> None:
        """Attack a player."""

    @abstractmethod
    def save(self) -> dict[str, Any]:
        """Return a snapshot of the enemy's state."""

    def _strike(self, player: Jogador) -> None:
        """Hurt the player if this enemy has any strength."""
        if self.strength > 0:
            player.take_damage()

    def _remember_collision(self, other: Entidade) -> None:
        self.last_collision = other

    def _state(self) -> dict[str, Any]:
        return {
            "kind": type(self).__name__,
            "x": self.sprite.position.x,
            "y": self.sprite.position.y,
            "velocity_y": self.velocity_y,
            "evil_level": self.evil_level,
        }


class InimigoFraco(Inimigo):
    """A weak enemy that just falls until it lands."""

    def __init__(
        self,
        x: int,
        y: int,
        speed: float,
        texture: Texture,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(x, y, speed, clock)
        self.set_texture(texture)
        self.sprite.set_position(float(x), float(y))
        self.start_falling()

    def update(self, delta_time: float) -> None:
        self.apply_gravity(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)

    def handle_collision(self, other: Entidade) -> None:
        """Remember what the enemy last touched."""
        self._remember_collision(other)

    def damage(self, player: Jogador) -> None:
        """Weak enemies have no strength, so the player is left unhurt."""
        self._strike(player)

    def save(self) -> dict[str, Any]:
        return self._state()


class InimigoMedio(Inimigo):
    """A medium enemy that stands still under gravity."""

    def __init__(
        self,
        texture: Texture,
        x: int = 0,
        y: int = 0,
        speed: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(x, y, speed, clock)
        self.size = 50
        self.strength = 10
        self.set_texture(texture)
        self.sprite.set_position(float(x), float(y))
        self.evil_level = 2
        self.start_falling()

    def update(self, delta_time: float) -> None:
        self.apply_gravity(delta_time)
        self.sprite.move(0.0, self.velocity_y)

    def handle_collision(self, other: Entidade) -> None:
        """Remember what the enemy last touched."""
        self._remember_collision(other)

    def damage(self, player: Jogador) -> None:
        print("Inimigo Medio ataca o jogador!")
        self._strike(player)

    def save(self) -> dict[str, Any]:
        print("Salvando estado do InimigoMedio...")
        return {**self._state(), "size": self.size}


class Chefao(Inimigo):
    """The boss: fires projectiles from a fixed pool on a cooldown."""

    POOL_SIZE = 10
    ATTACK_COOLDOWN = 2.5
    PROJECTILE_VELOCITY = Vector2(-150.0, 0.0)

    def __init__(
        self,
        texture: Texture,
        projectile_texture: Texture,
        x: int = 0,
        y: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(x, y, 15, clock)
        self.strength = 25
        self.health = 500
        self.attack_cooldown = self.ATTACK_COOLDOWN
        self.set_texture(texture)
        self.sprite.set_position(float(x), float(y))
        self.evil_level = 10
        self.projectiles = [Projetil(projectile_texture) for _ in range(self.POOL_SIZE)]
        self._last_attack = clock()

    def update(self, delta_time: float) -> None:
        self.apply_gravity(delta_time)
        self.sprite.move(0.0, self.velocity_y)
        self._attack()
        for projectile in self.projectiles:
            projectile.update(delta_time)

    def _attack(self) -> None:
        if self._clock() - self._last_attack <= self.attack_cooldown:
            return
        projectile = next((p for p in self.projectiles if not p.active), None)
        if projectile is None:
            return
        origin = self.sprite.position + Vector2(self.bounds().width / 2, 0.0)
        projectile.fire(origin, self.PROJECTILE_VELOCITY)
        self._last_attack = self._clock()

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        for projectile in self.projectiles:
            projectile.render(surface)

    def handle_collision(self, other: Entidade) -> None:
        """Remember what the boss last touched."""
        self._remember_collision(other)

    def damage(self, player: Jogador) -> None:
        print(f"Chefao ataca o jogador com forca {self.strength}!")
        self._strike(player)

    def save(self) -> dict[str, Any]:
        return {**self._state(), "health": self.health}