"""
Simulation state, input commands and the read-only world snapshot
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

from .constants import PLAYER_START_X, PLAYER_START_Y
from .entities import Player, Enemy, Bullet


class Pattern(IntEnum):
    """Formation layouts, indexed by level mod 5"""
    CLASSIC = 0
    DIAMOND = 1
    V_SHAPE = 2
    CIRCLE = 3
    WAVE = 4

    @property
    def label(self) -> str:
        return PATTERN_LABELS[self]


PATTERN_LABELS = {
    Pattern.CLASSIC: "Classic",
    Pattern.DIAMOND: "Diamond",
    Pattern.V_SHAPE: "V-Formation",
    Pattern.CIRCLE: "Circle",
    Pattern.WAVE: "Wave",
}


class GamePhase(Enum):
    LEVEL_TRANSITION = "level_transition"
    ACTIVE = "active"
    VICTORY = "victory"
    GAME_OVER = "game_over"


class Command(Enum):
    """Logical input for one tick"""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ADVANCE = "advance"  # fire while active, continue/restart otherwise


EVENT_KEYS = ("kills", "points", "hits_taken", "shots", "enemy_shots", "drops",
              "levels_cleared", "game_over")


def empty_events() -> Dict[str, float]:
    return {k: 0.0 for k in EVENT_KEYS}


@dataclass
class SimulationState:
    """Everything a running game owns; mutated in place by the subsystems"""
    player: Player = field(default_factory=lambda: Player.at(PLAYER_START_X, PLAYER_START_Y))
    enemies: List[Enemy] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)

    level: int = 1
    score: int = 0
    frame_count: int = 0
    enemy_direction: float = 1.0
    enemy_speed: float = 0.5
    pattern: Pattern = Pattern.CLASSIC
    phase: GamePhase = GamePhase.LEVEL_TRANSITION
    kills_this_level: int = 0
    transition_timer: int = 0

    # Per-tick counters, cleared at the start of every tick
    events: Dict[str, float] = field(default_factory=empty_events)

    def snapshot(self) -> "WorldSnapshot":
        box = self.player.box
        return WorldSnapshot(
            player=PlayerView(box.x, box.y, self.player.lives, box.active),
            enemies=tuple(EnemyView(e.box.x, e.box.y, e.type)
                          for e in self.enemies if e.box.active),
            bullets=tuple(BulletView(b.box.x, b.box.y, b.from_player)
                          for b in self.bullets if b.box.active),
            score=self.score,
            level=self.level,
            phase=self.phase,
            pattern=self.pattern,
            kills_this_level=self.kills_this_level,
            frame_count=self.frame_count,
        )


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    lives: int
    active: bool


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    type: int


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    from_player: bool


@dataclass(frozen=True)
class WorldSnapshot:
    """What the presentation layer is allowed to see"""
    player: PlayerView
    enemies: Tuple[EnemyView, ...]
    bullets: Tuple[BulletView, ...]
    score: int
    level: int
    phase: GamePhase
    pattern: Pattern
    kills_this_level: int = 0
    frame_count: int = 0
