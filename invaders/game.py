"""
Game state machine
------------------
Owns one SimulationState and advances it one frame per ``tick``:

    LEVEL_TRANSITION --advance--> ACTIVE (formation regenerated)
    ACTIVE --roster empty--> VICTORY --advance--> LEVEL_TRANSITION (level + 1)
    ACTIVE --lives gone / formation landed--> GAME_OVER --advance--> restart

Only ADVANCE leaves the non-active phases; movement is ignored there.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from .constants import PLAYER_START_X, PLAYER_START_Y, PLAYER_LIVES
from .controller import (
    move_player, player_fire, advance_formation, enemy_fire, update_bullets,
)
from .collisions import check_collisions
from .formations import init_enemies, pattern_for_level
from .state import Command, GamePhase, SimulationState, WorldSnapshot, empty_events
from .utils import make_rng


class InvadersGame:
    """Fixed-timestep invaders simulation"""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        restart_with_intro: bool = False,
    ):
        self.rng = rng if rng is not None else make_rng(seed)
        # Restart from GAME_OVER normally skips the level intro
        self.restart_with_intro = restart_with_intro

        self.state = SimulationState()
        init_enemies(self.state)
        self.state.phase = GamePhase.LEVEL_TRANSITION

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def snapshot(self) -> WorldSnapshot:
        return self.state.snapshot()

    def tick(self, commands: Iterable[Command] = ()) -> WorldSnapshot:
        """Apply this frame's commands, run one frame, return the new snapshot"""
        commands = set(commands)
        for cmd in commands:
            if not isinstance(cmd, Command):
                raise ValueError(f"Unknown command: {cmd!r}")

        state = self.state
        state.events = empty_events()

        if Command.ADVANCE in commands:
            self._advance()

        if state.phase == GamePhase.ACTIVE:
            if Command.MOVE_LEFT in commands:
                move_player(state, -1)
            if Command.MOVE_RIGHT in commands:
                move_player(state, 1)

        if state.phase == GamePhase.LEVEL_TRANSITION:
            state.transition_timer += 1
        elif state.phase == GamePhase.ACTIVE:
            self._step_active()
            if state.phase == GamePhase.VICTORY:
                state.events["levels_cleared"] += 1
            elif state.phase == GamePhase.GAME_OVER:
                state.events["game_over"] += 1

        self._check_invariants()
        return state.snapshot()

    # ----------------------------
    # Transitions
    # ----------------------------

    def _advance(self):
        state = self.state
        if state.phase == GamePhase.GAME_OVER:
            self.restart()
        elif state.phase == GamePhase.LEVEL_TRANSITION:
            init_enemies(state)
            state.phase = GamePhase.ACTIVE
        elif state.phase == GamePhase.VICTORY:
            state.level += 1
            state.pattern = pattern_for_level(state.level)
            state.transition_timer = 0
            state.phase = GamePhase.LEVEL_TRANSITION
        else:
            player_fire(state)

    def restart(self):
        """Back to level 1 with a fresh formation, keeping the same player"""
        state = self.state
        state.score = 0
        state.level = 1

        player = state.player
        player.lives = PLAYER_LIVES
        player.box.x = PLAYER_START_X
        player.box.y = PLAYER_START_Y
        player.box.active = True

        state.bullets.clear()
        init_enemies(state)

        if self.restart_with_intro:
            state.transition_timer = 0
            state.phase = GamePhase.LEVEL_TRANSITION
        else:
            state.phase = GamePhase.ACTIVE

    # ----------------------------
    # Active frame
    # ----------------------------

    def _step_active(self):
        state = self.state

        if not state.enemies:
            state.phase = GamePhase.VICTORY
            return

        advance_formation(state)
        if state.phase == GamePhase.GAME_OVER:
            return

        enemy_fire(state, self.rng)
        update_bullets(state)
        check_collisions(state)

        state.frame_count += 1

    def _check_invariants(self):
        state = self.state
        assert state.player.lives >= 0, "negative lives"
        assert all(e.box.active for e in state.enemies), "inactive enemy left in roster"
        assert all(b.box.active for b in state.bullets), "inactive bullet left in flight"
