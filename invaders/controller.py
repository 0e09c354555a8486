"""
Movement & fire controller

Moves the player, marches the formation, picks enemy shooters and flies
bullets. Every function mutates the SimulationState it is handed.
"""

from __future__ import annotations

import random
from typing import List

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    PLAYER_WIDTH, PLAYER_SPEED,
    ENEMY_WIDTH, ENEMY_HEIGHT,
    BULLET_WIDTH, BULLET_SPEED, ENEMY_BULLET_SPEED,
    EDGE_MARGIN,
)
from .entities import Bullet, Enemy
from .state import GamePhase, SimulationState
from .utils import clamp


def move_player(state: SimulationState, direction: int):
    """Shift the player one step left (-1) or right (+1), kept on screen"""
    box = state.player.box
    box.x = clamp(box.x + direction * PLAYER_SPEED, 0, SCREEN_WIDTH - PLAYER_WIDTH)


def player_fire(state: SimulationState):
    box = state.player.box
    if not box.active:
        return
    x = box.x + PLAYER_WIDTH / 2 - BULLET_WIDTH / 2
    state.bullets.append(Bullet.at(x, box.y, from_player=True))
    state.events["shots"] += 1


def fire_interval(level: int) -> int:
    """Frames between enemy volleys"""
    return max(30, 60 - level * 3)


def shooters_per_volley(level: int) -> int:
    return min(3, 1 + level // 4)


def at_edge(state: SimulationState) -> bool:
    for enemy in state.enemies:
        if not enemy.box.active:
            continue
        if state.enemy_direction > 0 and enemy.box.right >= SCREEN_WIDTH - EDGE_MARGIN:
            return True
        if state.enemy_direction < 0 and enemy.box.x <= EDGE_MARGIN:
            return True
    return False


def advance_formation(state: SimulationState):
    """
    March every active enemy sideways; on reaching an edge the whole formation
    drops half an enemy height and turns around. Sets GAME_OVER in the same
    frame when a dropped enemy's bottom reaches the player's row.
    """
    drop = at_edge(state)
    dx = state.enemy_direction * state.enemy_speed

    for enemy in state.enemies:
        if not enemy.box.active:
            continue
        enemy.box.x += dx
        if drop:
            enemy.box.y += ENEMY_HEIGHT / 2

    if not drop:
        return

    state.enemy_direction *= -1
    state.events["drops"] += 1

    player_y = state.player.box.y
    if any(e.box.active and e.box.bottom >= player_y for e in state.enemies):
        state.phase = GamePhase.GAME_OVER


def enemy_fire(state: SimulationState, rng: random.Random):
    """Every few frames a handful of random enemies shoot straight down"""
    if state.frame_count % fire_interval(state.level) != 0:
        return

    shooters: List[Enemy] = [e for e in state.enemies if e.box.active]
    if not shooters:
        return

    n = min(shooters_per_volley(state.level), len(shooters))
    for _ in range(n):
        shooter = rng.choice(shooters)
        x = shooter.box.x + ENEMY_WIDTH / 2 - BULLET_WIDTH / 2
        state.bullets.append(Bullet.at(x, shooter.box.bottom, from_player=False))
        state.events["enemy_shots"] += 1


def update_bullets(state: SimulationState):
    for bullet in state.bullets:
        if not bullet.box.active:
            continue

        if bullet.from_player:
            bullet.box.y -= BULLET_SPEED
            if bullet.box.y < 0:
                bullet.box.active = False
        else:
            bullet.box.y += ENEMY_BULLET_SPEED
            if bullet.box.y > SCREEN_HEIGHT:
                bullet.box.active = False

    state.bullets = [b for b in state.bullets if b.box.active]
