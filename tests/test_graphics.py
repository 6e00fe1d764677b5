import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from obliviion.graphics import GerenciadorGrafico, get_instance  # noqa: E402


@pytest.fixture
def graphics():
    manager = GerenciadorGrafico()
    yield manager
    manager.close()


def test_window_has_default_size_and_title(graphics):
    assert graphics.window.get_size() == GerenciadorGrafico.SIZE
    assert pygame.display.get_caption()[0] == "Obliviion"
    assert graphics.is_open() is True


def test_custom_size():
    manager = GerenciadorGrafico(size=(320, 240))
    try:
        assert manager.window.get_size() == (320, 240)
    finally:
        manager.close()


def test_clear_paints_black(graphics):
    graphics.window.fill((255, 255, 255))
    graphics.clear()
    assert graphics.window.get_at((0, 0)) == pygame.Color(0, 0, 0, 255)


def test_display_keeps_window_open(graphics):
    graphics.clear()
    graphics.display()
    assert graphics.is_open() is True


def test_close_is_idempotent(graphics):
    graphics.close()
    assert graphics.is_open() is False
    graphics.close()
    assert graphics.is_open() is False


def test_get_instance_returns_same_manager():
    first = get_instance()
    try:
        assert get_instance() is first
    finally:
        first.close()