"""Static obstacles: platforms, blocks and hazards."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from obliviion.entities import Entidade, Personagem
from obliviion.geometry import Texture
from obliviion.player import Jogador


class Obstaculo(Entidade):
    """A piece of scenery that may or may not hurt the player."""

    LANDING_TOLERANCE = 20.0

    def __init__(self, texture: Texture, x: int = 0, y: int = 0) -> None:
        super().__init__(x, y)
        self.harmful = False
        self.age = 0.0
        self.set_texture(texture)
        self.sprite.set_position(float(x), float(y))

    @abstractmethod
    def save(self) -> dict[str, Any]:
        """Return a snapshot of the obstacle's state."""

    def update(self, delta_time: float) -> None:
        """Obstacles stay put; only the time they have existed advances."""
        self.age += delta_time

    def _state(self) -> dict[str, Any]:
        return {
            "kind": type(self).__name__,
            "x": self.sprite.position.x,
            "y": self.sprite.position.y,
            "harmful": self.harmful,
        }

    def _land(self, other: Entidade) -> None:
        """Stop a falling character on top of this obstacle."""
        if not isinstance(other, Personagem):
            return
        character = other.bounds()
        top = self.bounds().top
        if other.velocity_y > 0.0 and character.bottom < top + self.LANDING_TOLERANCE:
            overlap = character.bottom - top
            other.move(0.0, -overlap)
            other.stop_falling()


class ObstaculoDificil(Obstaculo):
    """A harmful obstacle such as spikes."""

    def __init__(
        self, texture: Texture, x: int = 0, y: int = 0, damage: int = 10
    ) -> None:
        super().__init__(texture, x, y)
        self.harmful = True
        self.damage = damage

    def update(self, delta_time: float) -> None:
        """Hazards do not move."""
        super().update(delta_time)

    def handle_collision(self, other: Entidade) -> None:
        if self.harmful and isinstance(other, Jogador):
            print(f"Jogador tomou {self.damage} de dano do obstaculo!")

    def save(self) -> dict[str, Any]:
        return {**self._state(), "damage": self.damage}


class ObstaculoMedio(Obstaculo):
    """A harmless block characters can stand on."""

    def __init__(self, texture: Texture, x: int = 0, y: int = 0) -> None:
        super().__init__(texture, x, y)
        self.width = self.bounds().width

    def update(self, delta_time: float) -> None:
        """Blocks do not move."""
        super().update(delta_time)

    def handle_collision(self, other: Entidade) -> None:
        self._land(other)

    def save(self) -> dict[str, Any]:
        print("Salvando estado do Obst_medio...")
        return {**self._state(), "width": self.width}


class Plataforma(Obstaculo):
    """A harmless platform characters can stand on."""

    def update(self, delta_time: float) -> None:
        """Platforms do not move."""
        super().update(delta_time)

    def handle_collision(self, other: Entidade) -> None:
        self._land(other)

    def save(self) -> dict[str, Any]:
        return self._state()