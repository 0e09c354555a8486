import random

import pytest

from invaders.constants import SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_WIDTH, ENEMY_HEIGHT
from invaders.controller import (
    advance_formation, enemy_fire, update_bullets, move_player, player_fire,
    fire_interval, shooters_per_volley,
)
from invaders.entities import Enemy, Bullet
from invaders.state import GamePhase


def test_formation_marches_sideways(state):
    state.enemies = [Enemy.at(100, 100), Enemy.at(300, 100)]
    advance_formation(state)
    assert [e.box.x for e in state.enemies] == [pytest.approx(100.65), pytest.approx(300.65)]
    assert [e.box.y for e in state.enemies] == [100, 100]
    assert state.enemy_direction == 1.0


def test_drop_shifts_every_enemy_and_flips_once(state):
    state.enemies = [Enemy.at(765, 100), Enemy.at(400, 200), Enemy.at(50, 150)]
    advance_formation(state)

    assert [e.box.y for e in state.enemies] == [100 + ENEMY_HEIGHT / 2, 200 + ENEMY_HEIGHT / 2,
                                              150 + ENEMY_HEIGHT / 2]
    assert state.enemy_direction == -1.0
    assert state.events["drops"] == 1
    assert state.phase == GamePhase.ACTIVE

    # moving left now, nowhere near the left edge: no second drop
    advance_formation(state)
    assert state.enemy_direction == -1.0
    assert state.enemies[0].box.y == 100 + ENEMY_HEIGHT / 2


def test_left_edge_drops(state):
    state.enemy_direction = -1.0
    state.enemies = [Enemy.at(10, 100)]
    advance_formation(state)
    assert state.enemies[0].box.y == 115
    assert state.enemy_direction == 1.0


def test_inactive_enemy_at_edge_is_ignored(state):
    ghost = Enemy.at(780, 100)
    ghost.box.active = False
    state.enemies = [ghost, Enemy.at(400, 100)]
    advance_formation(state)
    assert state.enemy_direction == 1.0
    assert ghost.box.x == 780


def test_dropping_onto_player_row_ends_game_same_frame(state):
    # bottom edge 510 + 15 = 525 >= player y 520
    state.enemies = [Enemy.at(765, 480)]
    advance_formation(state)
    assert state.phase == GamePhase.GAME_OVER


def test_dropping_short_of_player_row_keeps_playing(state):
    # bottom edge 470 + 15 = 485 < 520
    state.enemies = [Enemy.at(765, 440)]
    advance_formation(state)
    assert state.phase == GamePhase.ACTIVE


def test_fire_schedule_scales_with_level():
    assert fire_interval(1) == 57
    assert fire_interval(10) == 30
    assert fire_interval(30) == 30
    assert shooters_per_volley(1) == 1
    assert shooters_per_volley(4) == 2
    assert shooters_per_volley(8) == 3
    assert shooters_per_volley(40) == 3


def test_enemy_fire_gated_by_frame_count(state):
    state.enemies = [Enemy.at(100, 100), Enemy.at(200, 100)]
    rng = random.Random(0)

    state.frame_count = 1
    enemy_fire(state, rng)
    assert state.bullets == []

    state.frame_count = 57
    enemy_fire(state, rng)
    assert len(state.bullets) == 1
    bullet = state.bullets[0]
    assert not bullet.from_player
    assert bullet.box.y == 130
    assert bullet.box.x in (100 + 15 - 2, 200 + 15 - 2)


def test_volley_size_never_exceeds_active_enemies(state):
    state.level = 8
    state.frame_count = 0
    state.enemies = [Enemy.at(100, 100)]
    enemy_fire(state, random.Random(0))
    assert len(state.bullets) == 1

    state.bullets = []
    state.enemies = [Enemy.at(100 * i, 100) for i in range(1, 6)]
    enemy_fire(state, random.Random(0))
    assert len(state.bullets) == 3
    assert state.events["enemy_shots"] == 4


def test_shooter_choice_is_reproducible(state):
    state.level = 8
    state.enemies = [Enemy.at(50 * i, 100) for i in range(1, 12)]

    enemy_fire(state, random.Random(7))
    first = [b.box.x for b in state.bullets]
    state.bullets = []
    enemy_fire(state, random.Random(7))
    assert [b.box.x for b in state.bullets] == first


def test_bullets_fly_and_leave_screen(state):
    up = Bullet.at(100, 5, from_player=True)
    down = Bullet.at(100, SCREEN_HEIGHT - 2, from_player=False)
    mid_up = Bullet.at(200, 300, from_player=True)
    mid_down = Bullet.at(200, 300, from_player=False)
    state.bullets = [up, down, mid_up, mid_down]

    update_bullets(state)

    assert state.bullets == [mid_up, mid_down]
    assert mid_up.box.y == 293
    assert mid_down.box.y == 304


def test_player_moves_and_stays_on_screen(state):
    start = state.player.box.x
    move_player(state, -1)
    assert state.player.box.x == start - 5

    state.player.box.x = 2
    move_player(state, -1)
    assert state.player.box.x == 0

    state.player.box.x = SCREEN_WIDTH - PLAYER_WIDTH - 1
    move_player(state, 1)
    assert state.player.box.x == SCREEN_WIDTH - PLAYER_WIDTH


def test_player_fires_from_nose(state):
    player_fire(state)
    bullet = state.bullets[0]
    assert bullet.from_player
    assert bullet.box.x == state.player.box.x + 20 - 2
    assert bullet.box.y == state.player.box.y
    assert state.events["shots"] == 1


def test_dead_player_cannot_fire(state):
    state.player.box.active = False
    player_fire(state)
    assert state.bullets == []
