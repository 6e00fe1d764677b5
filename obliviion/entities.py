"""Base classes for everything that lives in a level."""

from __future__ import annotations

import itertools
import time
from abc import ABC, abstractmethod
from typing import Callable

import pygame

from obliviion.geometry import RED, Rect, Sprite, Texture


class Ente(ABC):
    """Root of the game object hierarchy; every instance gets a unique id."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self.id = next(Ente._ids)

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object's state by delta_time seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the object onto a surface."""


class Entidade(Ente):
    """A game object with a sprite and a position."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        super().__init__()
        self.sprite = Sprite()
        self.x = x
        self.y = y
        self.visible = True

    def render(self, surface: pygame.Surface) -> None:
        if self.visible:
            self.sprite.draw(surface)

    @abstractmethod
    def handle_collision(self, other: Entidade) -> None:
        """React to touching another entity."""

    def bounds(self) -> Rect:
        return self.sprite.global_bounds()

    def set_texture(self, texture: Texture) -> None:
        self.sprite.set_texture(texture)


class Personagem(Entidade):
    """A character subject to gravity, knockback and damage flashes."""

    GRAVITY_UP = 2.0
    GRAVITY_DOWN = 5.0
    JUMP_STRENGTH = -20.0
    FLASH_DURATION = 0.9

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        speed: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(x, y)
        self.gravity_up = self.GRAVITY_UP
        self.gravity_down = self.GRAVITY_DOWN
        self.jump_strength = self.JUMP_STRENGTH
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.on_ground = False
        self.knockback_timer = 0.0
        self.speed = speed
        self.alive = True
        self.flashing = False
        self.flash_duration = 0.0
        self._clock = clock
        self._flash_started = clock()

    @property
    def flash_elapsed(self) -> float:
        """Seconds since the last damage flash started."""
        return self._clock() - self._flash_started

    def apply_gravity(self, delta_time: float) -> None:
        if self.on_ground:
            return
        gravity = self.gravity_up if self.velocity_y < 0.0 else self.gravity_down
        self.velocity_y += gravity * delta_time
        self.sprite.move(0.0, self.velocity_y * delta_time)

    def stop_falling(self) -> None:
        self.velocity_y = 0.0
        self.on_ground = True

    def start_falling(self) -> None:
        self.on_ground = False

    def move(self, dx: float, dy: float) -> None:
        self.sprite.move(dx, dy)

    def set_position(self, x: float, y: float) -> None:
        self.sprite.set_position(x, y)

    def take_damage(self) -> None:
        """Start a red damage flash."""
        self.flashing = True
        self.flash_duration = self.FLASH_DURATION
        self.sprite.color = RED
        self._flash_started = self._clock()

    def update(self, delta_time: float) -> None:
        """Characters without their own behaviour stay as they are."""

    def handle_collision(self, other: Entidade) -> None:
        """Characters without their own behaviour ignore collisions."""