"""
InvadersEnv - the invaders simulation as an RL environment
----------------------------------------------------------
- Gymnasium API over InvadersGame (one env step = one simulation tick)
- MultiDiscrete action space: [move(3), advance(2)]
- Vector observation: player state + formation state + top-K nearest enemies
  + top-M nearest enemy bullets
- Reward shaped from the per-tick simulation events
- Arcade window for "human" rendering, numpy raster for "rgb_array"

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m invaders.invaders_env
"""

from __future__ import annotations

import time
from typing import List, Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_LIVES,
    PLAYER_WIDTH, PLAYER_HEIGHT, ENEMY_WIDTH, ENEMY_HEIGHT,
    BULLET_WIDTH, BULLET_HEIGHT,
    PLAYER_COLOR, ENEMY_COLORS, PLAYER_BULLET_COLOR, ENEMY_BULLET_COLOR,
)
from .formations import formation_count
from .game import InvadersGame
from .state import Command, GamePhase, WorldSnapshot
from .utils import clamp, seed_everything

DEFAULT_REWARD = {
    "R_POINTS": 0.01,   # per score point
    "R_KILL": 0.5,
    "R_CLEAR": 5.0,     # formation wiped out
    "R_HIT": 2.0,       # life lost
    "R_SHOT": 0.01,
    "R_TIME": 0.001,
    "R_DEATH": 5.0,
}

# move: 0 stay, 1 left, 2 right
MOVE_COMMANDS = {1: Command.MOVE_LEFT, 2: Command.MOVE_RIGHT}


class InvadersEnv(gym.Env):
    """Fixed-timestep invaders environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 10_000,
        k_enemies: int = 5,
        m_bullets: int = 3,
        auto_advance: bool = True,
        restart_with_intro: bool = False,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.max_steps = max_steps

        self.k_enemies = k_enemies
        self.m_bullets = m_bullets
        # Skip intro / level-clear screens without spending agent actions
        self.auto_advance = auto_advance
        self.restart_with_intro = restart_with_intro

        self.reward_config = dict(DEFAULT_REWARD)
        if reward_config:
            unknown = set(reward_config) - set(DEFAULT_REWARD) - {"name", "description"}
            if unknown:
                raise ValueError(f"Unknown reward keys: {sorted(unknown)}")
            self.reward_config.update({k: v for k, v in reward_config.items() if k in DEFAULT_REWARD})

        self.action_space = spaces.MultiDiscrete([3, 2])

        # Player: x(1) lives(1) alive(1)
        # Formation: direction(1) speed(1) remaining fraction(1) level(1)
        # Each enemy: rel pos(2) type(1)
        # Each enemy bullet: rel pos(2)
        obs_dim = 3 + 4 + (self.k_enemies * 3) + (self.m_bullets * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.game: InvadersGame = None  # type: ignore
        self._snapshot: WorldSnapshot = None  # type: ignore
        self._step_count = 0
        self._formation_size = 1

        # Episode accumulators, surfaced through info
        self._kills = 0
        self._lives_lost = 0
        self._levels_cleared = 0
        self._events: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        # Draw the game's seed from the env's generator so reset() without
        # a seed still replays deterministically after the first seeded reset
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = InvadersGame(seed=game_seed, restart_with_intro=self.restart_with_intro)

        self._step_count = 0
        self._kills = 0
        self._lives_lost = 0
        self._levels_cleared = 0
        self._events = {}

        self._snapshot = self.game.snapshot()
        if self.auto_advance:
            self._snapshot = self.game.tick([Command.ADVANCE])
        self._formation_size = max(1, formation_count(self._snapshot.level))

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        if not self.action_space.contains(np.asarray(action, dtype=np.int64)):
            raise ValueError(f"Invalid action: {action!r}")
        move, advance = int(action[0]), int(action[1])

        commands: List[Command] = []
        if move in MOVE_COMMANDS:
            commands.append(MOVE_COMMANDS[move])
        if advance:
            commands.append(Command.ADVANCE)

        level_before = self._snapshot.level
        self._events = {}
        self._tick(commands)

        # Walk through the level-clear and intro screens in the same step
        if self.auto_advance and self._snapshot.phase in (GamePhase.VICTORY, GamePhase.LEVEL_TRANSITION):
            self._tick([Command.ADVANCE])
            if self._snapshot.phase == GamePhase.LEVEL_TRANSITION:
                self._tick([Command.ADVANCE])
        if self._snapshot.level != level_before:
            self._formation_size = max(1, formation_count(self._snapshot.level))

        self._kills += int(self._events["kills"])
        self._lives_lost += int(self._events["hits_taken"])
        self._levels_cleared += int(self._events["levels_cleared"])

        reward = self._compute_reward()

        terminated = self._snapshot.phase == GamePhase.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def _tick(self, commands: List[Command]):
        self._snapshot = self.game.tick(commands)
        for key, value in self.game.state.events.items():
            self._events[key] = self._events.get(key, 0.0) + value

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        snap = self._snapshot
        p = snap.player
        px = p.x + PLAYER_WIDTH / 2
        py = p.y + PLAYER_HEIGHT / 2

        state = self.game.state
        obs_parts = [
            (px / self.width) * 2 - 1,
            (p.lives / PLAYER_LIVES) * 2 - 1,
            1.0 if p.active else -1.0,
            float(state.enemy_direction),
            clamp(state.enemy_speed / 5.0, 0, 1) * 2 - 1,
            clamp(len(snap.enemies) / self._formation_size, 0, 1) * 2 - 1,
            clamp(snap.level / 20.0, 0, 1) * 2 - 1,
        ]

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            snap.enemies,
            key=lambda e: (e.x + ENEMY_WIDTH / 2 - px) ** 2 + (e.y + ENEMY_HEIGHT / 2 - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                dx = (e.x + ENEMY_WIDTH / 2 - px) / self.width
                dy = (e.y + ENEMY_HEIGHT / 2 - py) / self.height
                obs_parts += [clamp(dx, -1, 1), clamp(dy, -1, 1), e.type / 3.0]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        # Incoming bullets: top-M nearest
        incoming = [b for b in snap.bullets if not b.from_player]
        incoming.sort(key=lambda b: (b.x - px) ** 2 + (b.y - py) ** 2)
        for i in range(self.m_bullets):
            if i < len(incoming):
                b = incoming[i]
                dx = (b.x + BULLET_WIDTH / 2 - px) / self.width
                dy = (b.y + BULLET_HEIGHT / 2 - py) / self.height
                obs_parts += [clamp(dx, -1, 1), clamp(dy, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.reward_config
        ev = self._events

        reward = 0.0
        reward += r["R_POINTS"] * ev.get("points", 0.0)
        reward += r["R_KILL"] * ev.get("kills", 0.0)
        reward += r["R_CLEAR"] * ev.get("levels_cleared", 0.0)

        reward -= r["R_HIT"] * ev.get("hits_taken", 0.0)
        reward -= r["R_SHOT"] * ev.get("shots", 0.0)
        reward -= r["R_TIME"]

        if ev.get("game_over", 0.0):
            reward -= r["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        snap = self._snapshot
        return {
            "score": snap.score,
            "level": snap.level,
            "lives": snap.player.lives,
            "phase": snap.phase.value,
            "pattern": snap.pattern.label,
            "enemies_killed": self._kills,
            "lives_lost": self._lives_lost,
            "levels_cleared": self._levels_cleared,
            "num_enemies": len(snap.enemies),
            "num_bullets": len(snap.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                # arcade is only needed once a window is requested
                from .window import InvadersWindow
                self._window = InvadersWindow(self.width, self.height)
            self._window.snapshot = self._snapshot
            self._window.dispatch_events()
            self._window.on_draw()
            self._window.flip()
            return None

        return render_rgb_array(self._snapshot, self.width, self.height)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def render_rgb_array(snap: WorldSnapshot, width: int = SCREEN_WIDTH,
                     height: int = SCREEN_HEIGHT) -> np.ndarray:
    """Rasterize a snapshot's boxes into an (H, W, 3) uint8 frame"""
    frame = np.zeros((height, width, 3), dtype=np.uint8)

    def fill(x, y, w, h, color):
        x0, y0 = max(0, int(x)), max(0, int(y))
        x1, y1 = min(width, int(x + w)), min(height, int(y + h))
        if x0 < x1 and y0 < y1:
            frame[y0:y1, x0:x1] = color

    for e in snap.enemies:
        fill(e.x, e.y, ENEMY_WIDTH, ENEMY_HEIGHT, ENEMY_COLORS[e.type])
    for b in snap.bullets:
        fill(b.x, b.y, BULLET_WIDTH, BULLET_HEIGHT,
             PLAYER_BULLET_COLOR if b.from_player else ENEMY_BULLET_COLOR)
    if snap.player.active:
        fill(snap.player.x, snap.player.y, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_COLOR)

    return frame


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = InvadersEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... Close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}  "
          f"score={info['score']} level={info['level']} kills={info['enemies_killed']}")

    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
