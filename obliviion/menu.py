"""The in-game pause menu."""

from __future__ import annotations

from typing import Iterable, Optional

import pygame

from obliviion.entities import Ente
from obliviion.geometry import WHITE, YELLOW, Color, Rect, Vector2
from obliviion.player import Key


class Menu(Ente):
    """A vertical list of labels with one selected item, shown over the level."""

    QUIT_ITEM = "Sair"
    ITEM_X = 300.0
    FIRST_ITEM_Y = 180.0
    ITEM_SPACING = 50.0
    BOX_LEFT = 280.0
    BOX_TOP = 160.0
    BOX_WIDTH = 300.0
    BOX_PADDING = 40.0
    BOX_FILL: Color = (0, 0, 0, 180)
    OUTLINE_THICKNESS = 2

    def __init__(self, items: Iterable[str], font: Optional[pygame.font.Font] = None) -> None:
        super().__init__()
        self.items = tuple(items)
        if not self.items:
            raise ValueError("a menu needs at least one item")
        self.font = font
        self.selected_index = 0
        self.is_open = False
        self.open_time = 0.0

    @property
    def item_positions(self) -> list[Vector2]:
        """Top-left corner of each label."""
        return [
            Vector2(self.ITEM_X, self.FIRST_ITEM_Y + index * self.ITEM_SPACING)
            for index, _ in enumerate(self.items)
        ]

    @property
    def item_colors(self) -> list[Color]:
        """Yellow for the selected label, white for the rest."""
        return [
            YELLOW if index == self.selected_index else WHITE
            for index, _ in enumerate(self.items)
        ]

    @property
    def background_rect(self) -> Rect:
        height = len(self.items) * self.ITEM_SPACING + self.BOX_PADDING
        return Rect(self.BOX_LEFT, self.BOX_TOP, self.BOX_WIDTH, height)

    @property
    def selected_item(self) -> str:
        return self.items[self.selected_index]

    def open(self) -> None:
        self.is_open = True
        self.open_time = 0.0

    def close(self) -> None:
        self.is_open = False

    def handle_key(self, key: Key) -> Optional[str]:
        """Move the selection, or return the selected label when Enter is pressed."""
        if key is Key.UP:
            self.selected_index = max(0, self.selected_index - 1)
        elif key is Key.DOWN:
            self.selected_index = min(len(self.items) - 1, self.selected_index + 1)
        elif key is Key.ENTER:
            return self.selected_item
        return None

    def update(self, delta_time: float) -> None:
        """Track how long the menu has been open."""
        if self.is_open:
            self.open_time += delta_time

    def render(self, surface: pygame.Surface) -> None:
        if not self.is_open:
            return
        box = self.background_rect
        panel = pygame.Surface((int(box.width), int(box.height)), pygame.SRCALPHA)
        panel.fill(self.BOX_FILL)
        surface.blit(panel, (box.left, box.top))
        thickness = self.OUTLINE_THICKNESS
        outline = pygame.Rect(
            int(box.left) - thickness,
            int(box.top) - thickness,
            int(box.width) + 2 * thickness,
            int(box.height) + 2 * thickness,
        )
        pygame.draw.rect(surface, WHITE, outline, thickness)
        if self.font is None:
            return
        for label, color, position in zip(self.items, self.item_colors, self.item_positions):
            text = self.font.render(label, True, color)
            surface.blit(text, (position.x, position.y))