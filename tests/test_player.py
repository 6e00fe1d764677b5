import pygame
import pytest

from obliviion.geometry import WHITE, Texture, Vector2
from obliviion.player import Jogador, Key


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def grounded_player(**kwargs):
    player = Jogador(Texture(10, 10), **kwargs)
    player.stop_falling()
    return player


def test_player_starts_at_spawn_point():
    player = Jogador(Texture(10, 10))
    assert player.sprite.position == Vector2(375.0, 275.0)
    assert player.speed == 5.0


def test_left_moves_left_and_right_moves_right():
    left = grounded_player()
    right = grounded_player()
    left.update(1.0, {Key.LEFT})
    right.update(1.0, {Key.RIGHT})
    assert left.sprite.position.x < 375.0
    assert right.sprite.position.x > 375.0
    assert left.velocity_x == -right.velocity_x


def test_friction_reduces_speed():
    player = grounded_player()
    player.update(0.1, {Key.RIGHT})
    first = player.velocity_x
    player.update(0.1, set())
    assert 0.0 < player.velocity_x < first


def test_small_velocity_snaps_to_zero():
    player = grounded_player()
    player.velocity_x = 1.05
    player.update(0.0, set())
    assert player.velocity_x == 0.0


def test_knockback_blocks_input_and_counts_down():
    player = grounded_player()
    player.knockback_timer = 1.0
    player.update(0.25, {Key.LEFT})
    assert player.velocity_x == 0.0
    assert player.knockback_timer == pytest.approx(0.75)
    assert player.sprite.position.x == 375.0


def test_expired_knockback_resets_to_zero():
    player = grounded_player()
    player.knockback_timer = -0.5
    player.update(0.0, set())
    assert player.knockback_timer == 0.0


def test_jump_only_from_ground():
    player = grounded_player()
    player.update(0.0, {Key.SPACE})
    assert player.velocity_y == -20.0
    assert player.on_ground is False
    player.update(0.0, {Key.SPACE})
    assert player.velocity_y == -20.0


def test_airborne_player_falls():
    player = Jogador(Texture(10, 10))
    player.update(0.5, set())
    assert player.velocity_y > 0.0
    assert player.sprite.position.y > 275.0


def test_flash_ends_after_duration():
    clock = FakeClock()
    player = grounded_player(clock=clock)
    player.take_damage()
    clock.now = 0.5
    player.update(0.0, set())
    assert player.flashing is True
    clock.now = 1.0
    player.update(0.0, set())
    assert player.flashing is False


def test_render_draws_sprite():
    image = pygame.Surface((2, 2), pygame.SRCALPHA)
    image.fill(WHITE)
    player = Jogador(Texture.from_surface(image))
    player.set_position(1, 1)
    target = pygame.Surface((4, 4), pygame.SRCALPHA)
    player.render(target)
    assert tuple(target.get_at((1, 1))) == WHITE
    assert tuple(target.get_at((0, 0))) != WHITE