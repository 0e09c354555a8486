"""
Formation generator
-------------------
Builds the enemy roster for a level. The layout is chosen by ``level % 5``
and every layout grows with the level up to a fixed cap:

- Classic: rows x cols grid
- Diamond: rows of 1, 3, 5, ... enemies mirrored around the middle row
- V-Shape: two arms opening 30 px per row
- Circle:  ring around a point above the player's lane
- Wave:    Classic grid bent by one sine period across the columns
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .constants import (
    SCREEN_WIDTH, ENEMY_WIDTH, ENEMY_HEIGHT,
    ENEMY_SPACING_X, ENEMY_SPACING_Y,
    FORMATION_TOP, FORMATION_CENTER_X, CIRCLE_CENTER_Y,
)
from .entities import Enemy
from .state import Pattern, SimulationState

MAX_ROWS = 8
MAX_COLS = 12
MAX_DIAMOND_SIZE = 8
MAX_V_SIZE = 10
MAX_CIRCLE_ENEMIES = 30
MAX_CIRCLE_RADIUS = 200

V_ARM_SLOPE = 30
WAVE_AMPLITUDE = 30


def pattern_for_level(level: int) -> Pattern:
    return Pattern(level % 5)


def grid_size(level: int) -> Tuple[int, int]:
    """(rows, cols) shared by the Classic and Wave layouts"""
    rows = min(MAX_ROWS, 4 + level // 3)
    cols = min(MAX_COLS, 8 + level // 2)
    return rows, cols


def diamond_size(level: int) -> int:
    return min(MAX_DIAMOND_SIZE, 5 + level // 2)


def v_size(level: int) -> int:
    return min(MAX_V_SIZE, 6 + level // 2)


def circle_params(level: int) -> Tuple[int, float]:
    """(enemy count, radius)"""
    n = min(MAX_CIRCLE_ENEMIES, 12 + level * 2)
    radius = min(MAX_CIRCLE_RADIUS, 100 + level * 10)
    return n, float(radius)


def enemy_speed_for_level(level: int) -> float:
    return 0.5 + level * 0.15


def classic_formation(rows: int, cols: int) -> List[Enemy]:
    start_x = (SCREEN_WIDTH - cols * ENEMY_SPACING_X) / 2
    enemies = []
    for row in range(rows):
        for col in range(cols):
            x = start_x + col * ENEMY_SPACING_X
            y = FORMATION_TOP + row * ENEMY_SPACING_Y
            enemies.append(Enemy.at(x, y, row % 4))
    return enemies


def diamond_formation(size: int) -> List[Enemy]:
    enemies = []
    for row in range(size):
        if row < size // 2:
            in_row = row * 2 + 1
        else:
            in_row = (size - row - 1) * 2 + 1
        start_x = FORMATION_CENTER_X - in_row * ENEMY_SPACING_X / 2
        y = FORMATION_TOP + row * ENEMY_SPACING_Y
        for i in range(in_row):
            enemies.append(Enemy.at(start_x + i * ENEMY_SPACING_X, y, row % 4))
    return enemies


def v_formation(size: int) -> List[Enemy]:
    enemies = []
    for row in range(size):
        y = FORMATION_TOP + row * ENEMY_SPACING_Y
        # left arm, then right arm
        enemies.append(Enemy.at(FORMATION_CENTER_X - row * V_ARM_SLOPE, y, row % 4))
        enemies.append(Enemy.at(FORMATION_CENTER_X + row * V_ARM_SLOPE, y, row % 4))
    return enemies


def circle_formation(n: int, radius: float) -> List[Enemy]:
    enemies = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        x = FORMATION_CENTER_X + radius * math.cos(angle) - ENEMY_WIDTH / 2
        y = CIRCLE_CENTER_Y + radius * math.sin(angle) - ENEMY_HEIGHT / 2
        enemies.append(Enemy.at(x, y, i % 4))
    return enemies


def wave_formation(rows: int, cols: int) -> List[Enemy]:
    start_x = (SCREEN_WIDTH - cols * ENEMY_SPACING_X) / 2
    enemies = []
    for row in range(rows):
        for col in range(cols):
            x = start_x + col * ENEMY_SPACING_X
            offset = math.sin(2 * math.pi * col / cols) * WAVE_AMPLITUDE
            y = FORMATION_TOP + row * ENEMY_SPACING_Y + offset
            enemies.append(Enemy.at(x, y, row % 4))
    return enemies


def build_formation(level: int) -> Tuple[Pattern, List[Enemy]]:
    """Pattern and fresh roster for a level"""
    pattern = pattern_for_level(level)

    if pattern == Pattern.CLASSIC:
        enemies = classic_formation(*grid_size(level))
    elif pattern == Pattern.DIAMOND:
        enemies = diamond_formation(diamond_size(level))
    elif pattern == Pattern.V_SHAPE:
        enemies = v_formation(v_size(level))
    elif pattern == Pattern.CIRCLE:
        enemies = circle_formation(*circle_params(level))
    else:
        enemies = wave_formation(*grid_size(level))

    return pattern, enemies


def formation_count(level: int) -> int:
    """Number of enemies the level's formation starts with"""
    pattern = pattern_for_level(level)
    if pattern in (Pattern.CLASSIC, Pattern.WAVE):
        rows, cols = grid_size(level)
        return rows * cols
    if pattern == Pattern.DIAMOND:
        size = diamond_size(level)
        return sum(r * 2 + 1 if r < size // 2 else (size - r - 1) * 2 + 1
                   for r in range(size))
    if pattern == Pattern.V_SHAPE:
        return 2 * v_size(level)
    return circle_params(level)[0]


def init_enemies(state: SimulationState):
    """Replace the roster with the formation for ``state.level``"""
    state.enemies.clear()
    state.pattern, enemies = build_formation(state.level)
    state.enemies.extend(enemies)

    state.enemy_direction = 1.0
    state.enemy_speed = enemy_speed_for_level(state.level)
    state.kills_this_level = 0
