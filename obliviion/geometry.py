"""Two-dimensional geometry, textures and sprites used by every game object."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Union

import pygame

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RED: Color = (255, 0, 0, 255)
YELLOW: Color = (255, 255, 0, 255)


class TextureError(OSError):
    """Raised when an image file cannot be loaded as a texture."""


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap by a non-zero area."""
        min_x1, max_x1 = self._span_x()
        min_y1, max_y1 = self._span_y()
        min_x2, max_x2 = other._span_x()
        min_y2, max_y2 = other._span_y()
        return max(min_x1, min_x2) < min(max_x1, max_x2) and max(min_y1, min_y2) < min(
            max_y1, max_y2
        )


@dataclass(frozen=True)
class Texture:
    """Image data with its size; the surface may be absent for headless use."""

    width: int
    height: int
    surface: pygame.Surface | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> Texture:
        width, height = surface.get_size()
        return cls(width, height, surface)


def load_texture(path: Union[str, PathLike]) -> Texture:
    """Load an image file into a Texture, raising TextureError on failure."""
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        raise TextureError(f"Failed to load texture: {path}") from exc
    return Texture.from_surface(surface)


@dataclass
class Sprite:
    """A positioned, optionally tinted view of a texture."""

    texture: Texture | None = None
    position: Vector2 = field(default_factory=Vector2)
    color: Color = WHITE

    def move(self, dx: float, dy: float) -> None:
        self.position = Vector2(self.position.x + dx, self.position.y + dy)

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2(float(x), float(y))

    def set_texture(self, texture: Texture) -> None:
        self.texture = texture

    def global_bounds(self) -> Rect:
        """Return the rectangle the sprite covers in world coordinates."""
        width = self.texture.width if self.texture else 0
        height = self.texture.height if self.texture else 0
        return Rect(self.position.x, self.position.y, width, height)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the sprite onto a surface, applying its colour tint."""
        if self.texture is None or self.texture.surface is None:
            return
        image = self.texture.surface
        if self.color != WHITE:
            image = image.copy()
            image.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
        surface.blit(image, (self.position.x, self.position.y))