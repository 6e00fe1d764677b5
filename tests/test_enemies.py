import pygame
import pytest

from obliviion.enemies import Chefao, Inimigo, InimigoFraco, InimigoMedio
from obliviion.geometry import Texture, Vector2
from obliviion.player import Jogador

TEX = Texture(40, 30)
PROJ_TEX = Texture(4, 4)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_inimigo_is_abstract():
    with pytest.raises(TypeError):
        Inimigo()


def test_weak_enemy_starts_falling_at_position():
    enemy = InimigoFraco(600, 200, 400, TEX)
    assert enemy.sprite.position == Vector2(600, 200)
    assert enemy.on_ground is False


def test_weak_enemy_falls_on_update():
    enemy = InimigoFraco(600, 200, 400, TEX)
    enemy.update(0.1)
    assert enemy.velocity_y > 0
    assert enemy.sprite.position.y > 200
    assert enemy.sprite.position.x == 600


def test_weak_enemy_on_ground_stays_put():
    enemy = InimigoFraco(600, 200, 400, TEX)
    enemy.stop_falling()
    enemy.update(0.1)
    assert enemy.sprite.position == Vector2(600, 200)


def test_weak_enemy_damage_leaves_player_unharmed():
    player = Jogador(TEX)
    InimigoFraco(0, 0, 1, TEX).damage(player)
    assert player.flashing is False


def test_weak_enemy_save_reports_position():
    state = InimigoFraco(600, 200, 400, TEX).save()
    assert state["kind"] == "InimigoFraco"
    assert (state["x"], state["y"]) == (600, 200)


def test_medium_enemy_falls_faster_than_weak_enemy():
    weak = InimigoFraco(100, 100, 5, TEX)
    medium = InimigoMedio(TEX, 100, 100, 5)
    weak.update(0.1)
    medium.update(0.1)
    assert medium.velocity_y == weak.velocity_y
    assert medium.sprite.position.y > weak.sprite.position.y


def test_medium_enemy_attributes():
    medium = InimigoMedio(TEX, 10, 20, 5)
    assert medium.evil_level == 2
    assert medium.size == 50
    assert medium.on_ground is False


def test_medium_enemy_damage_and_save_print(capsys):
    medium = InimigoMedio(TEX, 10, 20, 5)
    medium.damage(Jogador(TEX))
    state = medium.save()
    out = capsys.readouterr().out
    assert out == "Inimigo Medio ataca o jogador!\nSalvando estado do InimigoMedio...\n"
    assert state["size"] == medium.size


def test_boss_has_inactive_pool():
    boss = Chefao(TEX, PROJ_TEX, 600, 350, clock=FakeClock())
    assert len(boss.projectiles) == Chefao.POOL_SIZE
    assert not any(p.active for p in boss.projectiles)
    assert boss.strength == 25
    assert boss.health == 500


def test_boss_does_not_fire_before_cooldown():
    clock = FakeClock()
    boss = Chefao(TEX, PROJ_TEX, 600, 350, clock=clock)
    clock.now = Chefao.ATTACK_COOLDOWN
    boss.update(0.0)
    assert not any(p.active for p in boss.projectiles)


def test_boss_fires_from_its_centre_after_cooldown():
    clock = FakeClock()
    boss = Chefao(TEX, PROJ_TEX, 600, 350, clock=clock)
    clock.now = Chefao.ATTACK_COOLDOWN + 0.5
    boss.update(0.0)
    active = [p for p in boss.projectiles if p.active]
    assert len(active) == 1
    expected = boss.sprite.position + Vector2(boss.bounds().width / 2, 0.0)
    assert active[0].sprite.position == expected
    assert active[0].velocity == Vector2(-150.0, 0.0)


def test_boss_cooldown_restarts_after_firing():
    clock = FakeClock()
    boss = Chefao(TEX, PROJ_TEX, 600, 350, clock=clock)
    clock.now = Chefao.ATTACK_COOLDOWN + 0.5
    boss.update(0.0)
    clock.now += 1.0
    boss.update(0.0)
    assert sum(p.active for p in boss.projectiles) == 1
    clock.now += Chefao.ATTACK_COOLDOWN
    boss.update(0.0)
    assert sum(p.active for p in boss.projectiles) == 2


def test_boss_damage_prints_strength(capsys):
    boss = Chefao(TEX, PROJ_TEX, clock=FakeClock())
    boss.damage(Jogador(TEX))
    assert capsys.readouterr().out == "Chefao ataca o jogador com forca 25!\n"


def test_boss_save_includes_health():
    state = Chefao(TEX, PROJ_TEX, 600, 350, clock=FakeClock()).save()
    assert state["kind"] == "Chefao"
    assert state["health"] == 500


def test_boss_render_draws_self_and_projectiles():
    boss_image = pygame.Surface((4, 4))
    boss_image.fill((0, 0, 250))
    shot_image = pygame.Surface((2, 2))
    shot_image.fill((250, 0, 0))
    clock = FakeClock()
    boss = Chefao(
        Texture.from_surface(boss_image),
        Texture.from_surface(shot_image),
        2,
        2,
        clock=clock,
    )
    boss.projectiles[0].fire(Vector2(15, 15), Vector2(0, 0))
    target = pygame.Surface((30, 30))
    boss.render(target)
    assert tuple(target.get_at((3, 3)))[:3] == (0, 0, 250)
    assert tuple(target.get_at((15, 15)))[:3] == (250, 0, 0)