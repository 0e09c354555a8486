import pytest

from invaders.collisions import points_for, check_collisions, resolve_enemy_hits
from invaders.entities import Enemy, Bullet
from invaders.state import GamePhase


@pytest.mark.parametrize("enemy_type,level,points", [
    (0, 1, 40),
    (3, 1, 10),
    (1, 2, 60),
    (2, 5, 100),
])
def test_points_scale_with_row_and_level(enemy_type, level, points):
    assert points_for(enemy_type, level) == points


def test_player_bullet_kills_enemy(state):
    state.enemies = [Enemy.at(100, 100, 0)]
    state.bullets = [Bullet.at(110, 110, from_player=True)]

    check_collisions(state)

    assert state.score == 40
    assert state.enemies == []
    assert state.bullets == []
    assert state.kills_this_level == 1
    assert state.events["kills"] == 1
    assert state.events["points"] == 40


def test_one_bullet_kills_at_most_one_enemy(state):
    state.level = 3
    # two overlapping enemies under a single bullet
    state.enemies = [Enemy.at(100, 100, 2), Enemy.at(105, 105, 1)]
    state.bullets = [Bullet.at(110, 110, from_player=True)]

    check_collisions(state)

    assert state.score == points_for(2, 3)
    assert len(state.enemies) == 1
    assert state.enemies[0].type == 1
    assert state.bullets == []


def test_enemy_bullets_pass_through_enemies(state):
    state.enemies = [Enemy.at(100, 100)]
    state.bullets = [Bullet.at(110, 110, from_player=False)]

    check_collisions(state)

    assert len(state.enemies) == 1
    assert len(state.bullets) == 1
    assert state.score == 0


def test_enemy_bullet_costs_a_life(state):
    p = state.player.box
    state.bullets = [Bullet.at(p.x + 5, p.y + 5, from_player=False)]

    check_collisions(state)

    assert state.player.lives == 2
    assert state.player.box.active
    assert state.phase == GamePhase.ACTIVE
    assert state.bullets == []


def test_at_most_one_life_lost_per_frame(state):
    p = state.player.box
    state.bullets = [Bullet.at(p.x + 5, p.y + 5, from_player=False),
                     Bullet.at(p.x + 20, p.y + 5, from_player=False)]

    check_collisions(state)

    assert state.player.lives == 2
    assert len(state.bullets) == 1


def test_last_life_ends_the_game(state):
    p = state.player.box
    state.player.lives = 1
    state.bullets = [Bullet.at(p.x + 5, p.y + 5, from_player=False)]

    check_collisions(state)

    assert state.player.lives == 0
    assert not state.player.box.active
    assert state.phase == GamePhase.GAME_OVER


def test_dead_player_is_not_hit_again(state):
    p = state.player.box
    state.player.lives = 0
    p.active = False
    state.bullets = [Bullet.at(p.x + 5, p.y + 5, from_player=False)]

    resolve_enemy_hits(state)

    assert state.player.lives == 0
    assert state.bullets[0].box.active


def test_inactive_entities_are_pruned(state):
    dead = Enemy.at(300, 300)
    dead.box.active = False
    spent = Bullet.at(10, 10, from_player=True)
    spent.box.active = False
    state.enemies = [dead, Enemy.at(500, 300)]
    state.bullets = [spent]

    check_collisions(state)

    assert len(state.enemies) == 1
    assert state.bullets == []
