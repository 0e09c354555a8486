"""
Arcade presentation layer: draws a WorldSnapshot, never touches the simulation
"""

from typing import Optional

import arcade

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    PLAYER_WIDTH, PLAYER_HEIGHT, ENEMY_WIDTH, ENEMY_HEIGHT,
    BULLET_WIDTH, BULLET_HEIGHT,
    PLAYER_COLOR, ENEMY_COLORS, PLAYER_BULLET_COLOR, ENEMY_BULLET_COLOR,
)
from .state import GamePhase, WorldSnapshot

WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
BRIGHT = (255, 255, 100)


class InvadersWindow(arcade.Window):
    """Arcade window for rendering snapshots of the invaders simulation"""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 title: str = "Invaders - Multi-Level Edition", **kwargs):
        super().__init__(width, height, title, **kwargs)
        self.background_color = (0, 0, 0)
        self.snapshot: Optional[WorldSnapshot] = None

    # Simulation uses a top-left origin, arcade a bottom-left one
    def _box(self, x, y, w, h, color):
        top = self.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def _text(self, text, y, color, size=18):
        arcade.draw_text(text, self.width / 2, self.height - y, color, size,
                         anchor_x="center", anchor_y="top")

    def on_draw(self):
        self.clear()
        snap = self.snapshot
        if snap is None:
            return

        p = snap.player
        if p.active:
            # hull and cockpit
            self._box(p.x, p.y + 10, PLAYER_WIDTH, PLAYER_HEIGHT - 10, PLAYER_COLOR)
            self._box(p.x + 15, p.y, 10, 15, PLAYER_COLOR)

        for e in snap.enemies:
            self._box(e.x, e.y, ENEMY_WIDTH, ENEMY_HEIGHT, ENEMY_COLORS[e.type])
            self._box(e.x + 8, e.y + 10, 4, 4, (0, 0, 0))
            self._box(e.x + 18, e.y + 10, 4, 4, (0, 0, 0))

        for b in snap.bullets:
            color = PLAYER_BULLET_COLOR if b.from_player else ENEMY_BULLET_COLOR
            self._box(b.x, b.y, BULLET_WIDTH, BULLET_HEIGHT, color)

        # HUD
        arcade.draw_text(f"Lives: {p.lives}", 10, self.height - 34, WHITE, 18)
        arcade.draw_text(f"Score: {snap.score}", self.width / 2 - 60, self.height - 34, WHITE, 18)
        arcade.draw_text(f"Level: {snap.level}", self.width - 120, self.height - 34, YELLOW, 18)

        if snap.phase == GamePhase.LEVEL_TRANSITION:
            self._draw_intro(snap)
        elif snap.phase in (GamePhase.VICTORY, GamePhase.GAME_OVER):
            self._draw_result(snap)

    def _draw_panel(self, half_h, border):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (0, 0, 0, 180))
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_lrbt_rectangle_filled(cx - 200, cx + 200, cy - half_h, cy + half_h, border)
        arcade.draw_lrbt_rectangle_filled(cx - 195, cx + 195, cy - half_h + 5, cy + half_h - 5, (0, 0, 0))

    def _draw_intro(self, snap: WorldSnapshot):
        self._draw_panel(100, (0, 150, 255))
        mid = self.height / 2
        self._text(f"LEVEL {snap.level}", mid - 60, CYAN, 36)
        self._text(f"Pattern: {snap.pattern.label}", mid - 10, WHITE)
        self._text("Press SPACE to continue", mid + 40, WHITE)

    def _draw_result(self, snap: WorldSnapshot):
        over = snap.phase == GamePhase.GAME_OVER
        self._draw_panel(120, (255, 0, 0) if over else (0, 255, 0))
        mid = self.height / 2
        self._text("GAME OVER!" if over else "LEVEL COMPLETE!", mid - 70, BRIGHT, 36 if over else 18)
        self._text(f"Level Reached: {snap.level}", mid - 20, WHITE)
        self._text(f"Final Score: {snap.score}", mid + 10, WHITE)
        self._text("Press SPACE to restart" if over else "Press SPACE for next level", mid + 60, WHITE)
