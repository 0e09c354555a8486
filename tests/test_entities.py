import pytest

from invaders.entities import Geometry, Player, Enemy, Bullet
from invaders.constants import (
    PLAYER_WIDTH, PLAYER_HEIGHT, ENEMY_WIDTH, ENEMY_HEIGHT, BULLET_WIDTH, BULLET_HEIGHT,
)


@pytest.mark.parametrize("other", [
    Geometry(5, 5, 10, 10),
    Geometry(-5, -5, 10, 10),
    Geometry(2, 2, 2, 2),
    Geometry(-10, 3, 40, 2),
])
def test_overlap_is_symmetric(other):
    box = Geometry(0, 0, 10, 10)
    assert box.collides_with(other)
    assert other.collides_with(box)


@pytest.mark.parametrize("other", [
    Geometry(10, 0, 10, 10),   # touching right edge
    Geometry(-10, 0, 10, 10),  # touching left edge
    Geometry(0, 10, 10, 10),   # touching bottom edge
    Geometry(0, -10, 10, 10),  # touching top edge
    Geometry(10, 10, 5, 5),    # touching corner
    Geometry(50, 50, 5, 5),
])
def test_touching_or_apart_does_not_collide(other):
    box = Geometry(0, 0, 10, 10)
    assert not box.collides_with(other)
    assert not other.collides_with(box)


def test_inactive_boxes_never_collide():
    a = Geometry(0, 0, 10, 10)
    b = Geometry(1, 1, 10, 10, active=False)
    assert not a.collides_with(b)
    assert not b.collides_with(a)


def test_entity_sizes_and_defaults():
    player = Player.at(10, 20)
    assert (player.box.width, player.box.height) == (PLAYER_WIDTH, PLAYER_HEIGHT)
    assert player.lives == 3
    assert player.box.active

    enemy = Enemy.at(30, 40, 2)
    assert (enemy.box.width, enemy.box.height) == (ENEMY_WIDTH, ENEMY_HEIGHT)
    assert (enemy.origin_x, enemy.origin_y) == (30, 40)
    assert enemy.type == 2

    bullet = Bullet.at(1, 2, from_player=False)
    assert (bullet.box.width, bullet.box.height) == (BULLET_WIDTH, BULLET_HEIGHT)
    assert not bullet.from_player


def test_enemy_origin_survives_movement():
    enemy = Enemy.at(100, 100)
    enemy.box.x += 15
    enemy.box.y += 15
    assert (enemy.origin_x, enemy.origin_y) == (100, 100)
