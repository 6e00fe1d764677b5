"""The player-controlled character."""

from __future__ import annotations

import time
from enum import Enum, auto
from typing import Callable, Collection

import pygame

from obliviion.entities import Personagem
from obliviion.geometry import RED, Texture


class Key(Enum):
    """Keys the game reacts to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()


class Jogador(Personagem):
    """The player: walks left and right, jumps, and flashes when hurt."""

    START_X = 375.0
    START_Y = 275.0
    FRICTION = 0.9

    def __init__(
        self, texture: Texture, clock: Callable[[], float] = time.monotonic
    ) -> None:
        super().__init__(speed=5.0, clock=clock)
        self.sprite.set_texture(texture)
        self.sprite.set_position(self.START_X, self.START_Y)

    def update(self, delta_time: float, pressed: Collection[Key] = frozenset()) -> None:
        """Advance the player given the keys currently held down."""
        if self.knockback_timer > 0.0:
            self.knockback_timer -= delta_time
        else:
            self.knockback_timer = 0.0
            if Key.LEFT in pressed:
                self.velocity_x = -self.speed
            elif Key.RIGHT in pressed:
                self.velocity_x = self.speed

        self.sprite.move(self.velocity_x * delta_time, 0.0)

        self.velocity_x *= self.FRICTION
        if abs(self.velocity_x) < 1.0:
            self.velocity_x = 0.0

        if Key.SPACE in pressed and self.on_ground:
            self.velocity_y = self.jump_strength
            self.on_ground = False

        if self.flashing and self.flash_elapsed > self.flash_duration:
            self.sprite.color = RED
            self.flashing = False

        self.apply_gravity(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)