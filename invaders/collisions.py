"""
Collision & scoring
"""

from __future__ import annotations

from .state import GamePhase, SimulationState


def points_for(enemy_type: int, level: int) -> int:
    """Top-row enemies (type 0) are worth the most; scales with level"""
    return (4 - enemy_type) * 10 * level


def resolve_player_hits(state: SimulationState):
    """Each player bullet destroys at most the first enemy it overlaps"""
    for bullet in state.bullets:
        if not bullet.box.active or not bullet.from_player:
            continue

        for enemy in state.enemies:
            if not enemy.box.active:
                continue
            if bullet.box.collides_with(enemy.box):
                bullet.box.active = False
                enemy.box.active = False
                points = points_for(enemy.type, state.level)
                state.score += points
                state.kills_this_level += 1
                state.events["kills"] += 1
                state.events["points"] += points
                break


def resolve_enemy_hits(state: SimulationState):
    """The first enemy bullet touching the player costs one life"""
    player = state.player
    for bullet in state.bullets:
        if not bullet.box.active or bullet.from_player:
            continue

        if bullet.box.collides_with(player.box):
            bullet.box.active = False
            player.lives -= 1
            state.events["hits_taken"] += 1
            assert player.lives >= 0, "player lost a life while already out of lives"

            if player.lives <= 0:
                player.box.active = False
                state.phase = GamePhase.GAME_OVER
            break


def check_collisions(state: SimulationState):
    score_before = state.score

    resolve_player_hits(state)
    resolve_enemy_hits(state)

    state.enemies = [e for e in state.enemies if e.box.active]
    state.bullets = [b for b in state.bullets if b.box.active]

    assert state.score >= score_before
