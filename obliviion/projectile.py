"""Projectiles fired by enemies."""

from __future__ import annotations

import pygame

from obliviion.entities import Entidade
from obliviion.geometry import Texture, Vector2
from obliviion.player import Jogador


class Projetil(Entidade):
    """A pooled projectile: inactive and hidden until fired."""

    SCREEN_WIDTH = 800
    SCREEN_HEIGHT = 600

    def __init__(self, texture: Texture) -> None:
        super().__init__()
        self.velocity = Vector2()
        self.active = False
        self.set_texture(texture)
        self.visible = False

    def fire(self, position: Vector2, velocity: Vector2) -> None:
        """Launch the projectile from a position with a velocity."""
        self.sprite.set_position(position.x, position.y)
        self.velocity = velocity
        self.active = True
        self.visible = True

    def _deactivate(self) -> None:
        self.active = False
        self.visible = False

    def update(self, delta_time: float) -> None:
        """Move an active projectile and retire it once it leaves the screen."""
        if not self.active:
            return
        self.sprite.move(self.velocity.x * delta_time, self.velocity.y * delta_time)
        pos = self.sprite.position
        if (
            pos.y > self.SCREEN_HEIGHT
            or pos.y < 0
            or pos.x > self.SCREEN_WIDTH
            or pos.x < 0
        ):
            self._deactivate()

    def handle_collision(self, other: Entidade) -> None:
        """An active projectile that hits a player is spent."""
        if not self.active:
            return
        if isinstance(other, Jogador):
            self._deactivate()
            print("Projetil atingiu o jogador!")

    def render(self, surface: pygame.Surface) -> None:
        if self.active:
            super().render(surface)