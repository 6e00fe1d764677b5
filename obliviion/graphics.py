"""The game window."""

from __future__ import annotations

from typing import Optional

import pygame

from obliviion.geometry import BLACK


class GerenciadorGrafico:
    """Owns the window, clears and presents frames at a limited rate."""

    SIZE = (800, 600)
    TITLE = "Obliviion"
    FRAME_LIMIT = 144

    def __init__(
        self,
        size: tuple[int, int] = SIZE,
        title: str = TITLE,
        frame_limit: int = FRAME_LIMIT,
    ) -> None:
        pygame.display.init()
        self._window = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self.frame_limit = frame_limit
        self._open = True

    @property
    def window(self) -> pygame.Surface:
        return self._window

    def clear(self) -> None:
        if self._open:
            self._window.fill(BLACK)

    def display(self) -> None:
        """Present the frame and wait to keep within the frame limit."""
        if self._open:
            pygame.display.flip()
            self._clock.tick(self.frame_limit)

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()


_instance: Optional[GerenciadorGrafico] = None


def get_instance() -> GerenciadorGrafico:
    """Return the shared window manager, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = GerenciadorGrafico()
    return _instance