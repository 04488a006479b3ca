import math
import random

import pygame
import pytest

from zombiesurvival.bullet import Bullet
from zombiesurvival.enemy import (
    HEALTH_BAR_FRONT_COLOR,
    MIN_DISTANCE_TO_PLAYER,
    Enemy,
    EnemyManager,
    EnemyType1,
    EnemyType2,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def test_enemy_types_match_their_stats():
    slow = EnemyType1(None, (0.0, 0.0))
    fast = EnemyType2(None, (0.0, 0.0))
    assert (slow.damage, slow.points, slow.speed, slow.health) == (2, 10, 50.0, 10)
    assert (fast.damage, fast.points, fast.speed, fast.health) == (1, 25, 200.0, 5)


def test_base_enemy_is_abstract():
    with pytest.raises(TypeError):
        Enemy(None, (0.0, 0.0), 1.0, 1)


def test_take_damage_clamps_to_zero_and_kills():
    enemy = EnemyType2(None, (0.0, 0.0))
    enemy.take_damage(2)
    assert not enemy.is_dead()
    assert enemy.health_fraction == pytest.approx(3 / 5)
    enemy.take_damage(100)
    assert enemy.health == 0
    assert enemy.is_dead()


def test_update_walks_towards_player():
    enemy = EnemyType1(None, (0.0, 0.0))
    player = (300.0, 400.0)
    before = math.dist(enemy.position, player)
    enemy.update(1.0, player)
    after = math.dist(enemy.position, player)
    assert before - after == pytest.approx(enemy.speed)


def test_update_on_player_position_stays_put():
    enemy = EnemyType1(None, (10.0, 10.0))
    enemy.update(1.0, (10.0, 10.0))
    assert enemy.position == (10.0, 10.0)


def test_hitbox_is_centered_on_enemy_after_update():
    enemy = EnemyType2(None, (120.0, -40.0))
    enemy.update(0.0, (0.0, 0.0))
    assert enemy.hitbox_bounds().center == pytest.approx(enemy.position)
    assert enemy.global_bounds().intersects(enemy.hitbox_bounds())


def test_check_collision_with_bullets():
    enemy = EnemyType1(None, (50.0, 50.0))
    enemy.update(0.0, (50.0, 50.0))
    assert enemy.check_collision(Bullet((50.0, 50.0), (1.0, 0.0), 600.0))
    assert not enemy.check_collision(Bullet((500.0, 500.0), (1.0, 0.0), 600.0))


def test_spawn_keeps_minimum_distance():
    manager = EnemyManager(random.Random(1234))
    player = (100.0, 100.0)
    for _ in range(20):
        enemy = manager.spawn_enemy(player)
        assert math.dist(enemy.position, player) >= MIN_DISTANCE_TO_PLAYER
    assert len(manager.enemies) == 20


def test_spawn_falls_back_when_every_attempt_is_too_close():
    manager = EnemyManager(_FixedRng(800))
    enemy = manager.spawn_enemy((0.0, 0.0))
    assert enemy.position == (300.0, 0.0)
    assert isinstance(enemy, EnemyType1)


def test_spawn_picks_second_type_on_odd_roll():
    manager = EnemyManager(_FixedRng(1))
    enemy = manager.spawn_enemy((0.0, 0.0))
    assert isinstance(enemy, EnemyType2)
    assert manager.enemies == [enemy]


def test_update_removes_dead_and_returns_points():
    manager = EnemyManager()
    fast = EnemyType2(None, (0.0, 0.0))
    slow = EnemyType1(None, (1000.0, 1000.0))
    manager.enemies = [fast, slow]
    bullets = [Bullet((0.0, 0.0), (1.0, 0.0), 600.0) for _ in range(fast.max_health)]
    earned = manager.update(0.0, (0.0, 0.0), bullets, False)
    assert earned == fast.points
    assert manager.enemies == [slow]


def test_update_without_hits_earns_nothing():
    manager = EnemyManager()
    manager.enemies = [EnemyType1(None, (0.0, 0.0))]
    assert manager.update(0.1, (500.0, 0.0), [], False) == 0
    assert len(manager.enemies) == 1


def test_level3_doubles_speed():
    manager = EnemyManager()
    slow = EnemyType1(None, (0.0, 0.0))
    fast = EnemyType2(None, (0.0, 0.0))
    manager.enemies = [slow, fast]
    manager.update(0.0, (0.0, 0.0), [], True)
    assert slow.speed == 2 * EnemyType1.BASE_SPEED
    assert fast.speed == 2 * EnemyType2.BASE_SPEED
    manager.update(0.0, (0.0, 0.0), [], False)
    assert slow.speed == EnemyType1.BASE_SPEED


def test_load_textures_reports_missing_files(tmp_path, capsys):
    manager = EnemyManager()
    manager.load_textures(tmp_path)
    err = capsys.readouterr().err
    assert "Failed to load zombie1 texture" in err
    assert "Failed to load zombie2 texture" in err
    assert manager.texture1 is None and manager.texture2 is None


def test_load_textures_reads_sprite_sheet(tmp_path):
    sprites = tmp_path / "Sprites"
    sprites.mkdir()
    sheet = pygame.Surface((96, 80))
    sheet.fill((255, 255, 255))
    pygame.image.save(sheet, str(sprites / "zombie3.png"))
    manager = EnemyManager(_FixedRng(0))
    manager.load_textures(tmp_path)
    assert manager.texture1.get_size() == (96, 80)
    enemy = manager.spawn_enemy((0.0, 0.0))
    surface = pygame.Surface((400, 400))
    enemy.draw(surface, (enemy.position[0] - 200.0, enemy.position[1] - 200.0))
    assert tuple(surface.get_at((200, 200)))[:3] == EnemyType1.TINT


def test_draw_shows_red_health_bar():
    surface = pygame.Surface((120, 200))
    surface.fill((0, 0, 0))
    enemy = EnemyType1(None, (60.0, 100.0))
    manager = EnemyManager()
    manager.enemies = [enemy]
    manager.draw(surface, (0.0, 0.0))
    bar_y = 100 - 60 + 3
    assert tuple(surface.get_at((60, bar_y)))[:3] == HEALTH_BAR_FRONT_COLOR