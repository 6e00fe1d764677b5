import pygame
import pytest

from obliviion.geometry import (
    RED,
    WHITE,
    Rect,
    Sprite,
    Texture,
    TextureError,
    Vector2,
    load_texture,
)


def test_vector_add_then_subtract_round_trips():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.0)
    assert (a + b) - b == a


def test_vector_scaling_by_one_and_zero():
    v = Vector2(3.0, -7.0)
    assert v * 1 == v
    assert 0 * v == Vector2(0.0, 0.0)


def test_rect_right_and_bottom():
    r = Rect(10, 20, 30, 40)
    assert r.right == 40
    assert r.bottom == 60


def test_rect_overlap_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)


def test_rect_disjoint():
    assert not Rect(0, 0, 5, 5).intersects(Rect(100, 100, 5, 5))


def test_rect_negative_size_is_normalised():
    a = Rect(10, 10, -10, -10)
    b = Rect(2, 2, 3, 3)
    assert a.intersects(b)


def test_load_texture_round_trip(tmp_path):
    surface = pygame.Surface((7, 3))
    path = tmp_path / "image.bmp"
    pygame.image.save(surface, str(path))
    texture = load_texture(path)
    assert (texture.width, texture.height) == (7, 3)
    assert texture.surface.get_size() == (7, 3)


def test_load_texture_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        load_texture(tmp_path / "missing.png")


def test_sprite_move_and_back_returns_to_start():
    sprite = Sprite()
    sprite.set_position(4, 9)
    start = sprite.position
    sprite.move(2.5, -1.0)
    assert sprite.position != start
    sprite.move(-2.5, 1.0)
    assert sprite.position == start


def test_sprite_bounds_follow_texture_and_position():
    sprite = Sprite()
    sprite.set_texture(Texture(16, 8))
    sprite.set_position(3, 4)
    assert sprite.global_bounds() == Rect(3, 4, 16, 8)


def test_sprite_without_texture_has_empty_bounds():
    sprite = Sprite()
    bounds = sprite.global_bounds()
    assert bounds.width == 0 and bounds.height == 0


def test_sprite_draw_blits_at_position():
    image = pygame.Surface((2, 2), pygame.SRCALPHA)
    image.fill(WHITE)
    target = pygame.Surface((10, 10), pygame.SRCALPHA)
    sprite = Sprite(Texture.from_surface(image))
    sprite.set_position(3, 4)
    sprite.draw(target)
    assert tuple(target.get_at((3, 4))) == WHITE
    assert tuple(target.get_at((0, 0))) != WHITE


def test_sprite_draw_applies_tint():
    image = pygame.Surface((2, 2), pygame.SRCALPHA)
    image.fill(WHITE)
    target = pygame.Surface((4, 4), pygame.SRCALPHA)
    sprite = Sprite(Texture.from_surface(image), color=RED)
    sprite.draw(target)
    assert tuple(target.get_at((0, 0))) == RED
    assert tuple(image.get_at((0, 0))) == WHITE