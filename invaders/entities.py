"""
Game entity dataclasses

Every entity embeds a Geometry box instead of inheriting from it.
"""

from dataclasses import dataclass

from .constants import (
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_LIVES,
    ENEMY_WIDTH, ENEMY_HEIGHT,
    BULLET_WIDTH, BULLET_HEIGHT,
)


@dataclass
class Geometry:
    """Axis-aligned box, top-left origin"""
    x: float
    y: float
    width: int
    height: int
    active: bool = True

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def collides_with(self, other: "Geometry") -> bool:
        """Strict overlap of two active boxes; touching edges do not count"""
        return (self.active and other.active and
                self.x < other.x + other.width and
                self.x + self.width > other.x and
                self.y < other.y + other.height and
                self.y + self.height > other.y)


@dataclass
class Player:
    """Player ship"""
    box: Geometry
    lives: int = PLAYER_LIVES

    @classmethod
    def at(cls, x: float, y: float) -> "Player":
        return cls(box=Geometry(x, y, PLAYER_WIDTH, PLAYER_HEIGHT))


@dataclass
class Enemy:
    """Formation enemy; type 0 is the top row and worth the most"""
    box: Geometry
    type: int = 0
    origin_x: float = 0.0
    origin_y: float = 0.0

    @classmethod
    def at(cls, x: float, y: float, type: int = 0) -> "Enemy":
        return cls(box=Geometry(x, y, ENEMY_WIDTH, ENEMY_HEIGHT),
                   type=type, origin_x=x, origin_y=y)


@dataclass
class Bullet:
    """Projectile fired by the player (upward) or an enemy (downward)"""
    box: Geometry
    from_player: bool

    @classmethod
    def at(cls, x: float, y: float, from_player: bool) -> "Bullet":
        return cls(box=Geometry(x, y, BULLET_WIDTH, BULLET_HEIGHT), from_player=from_player)
