"""
Custom callback for tracking task-specific metrics during training.
Records: final score, level reached, enemies killed, lives lost, levels cleared.
"""

import os
import csv
from typing import Dict, List, Any, Optional

import numpy as np
from stable_baselines3.common.callbacks import BaseCallback

CSV_COLUMNS = [
    "timestep", "episode", "reward", "length",
    "score", "level", "kills", "lives_lost", "levels_cleared",
]


class MetricsCallback(BaseCallback):
    """
    Callback to track and log task-specific metrics per episode.
    Saves to CSV for easy plotting.
    """

    def __init__(
        self,
        log_dir: str,
        algo_name: str,
        verbose: int = 1,
    ):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.algo_name = algo_name

        self.episode_rewards: List[float] = []
        self.episode_lengths: List[int] = []
        self.episode_scores: List[int] = []
        self.episode_levels: List[int] = []
        self.episode_kills: List[int] = []

        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def _on_training_start(self) -> None:
        """Initialize CSV file for logging."""
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.algo_name}_metrics.csv")

        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow(CSV_COLUMNS)
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[MetricsCallback] Logging to {self.csv_path}")

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            # Monitor wrapper adds episode info on the final step
            if done and "episode" in info:
                self.record_episode(info)

        return True

    def record_episode(self, info: Dict[str, Any]):
        ep_info = info["episode"]
        row = [
            self.num_timesteps,
            len(self.episode_rewards) + 1,
            ep_info["r"],
            ep_info["l"],
            info.get("score", 0),
            info.get("level", 1),
            info.get("enemies_killed", 0),
            info.get("lives_lost", 0),
            info.get("levels_cleared", 0),
        ]

        self.episode_rewards.append(ep_info["r"])
        self.episode_lengths.append(ep_info["l"])
        self.episode_scores.append(row[4])
        self.episode_levels.append(row[5])
        self.episode_kills.append(row[6])

        if self.csv_writer:
            self.csv_writer.writerow(row)
            self.csv_file.flush()

        if self.verbose > 0 and len(self.episode_rewards) % 10 == 0:
            avg_reward = sum(self.episode_rewards[-10:]) / 10
            avg_score = sum(self.episode_scores[-10:]) / 10
            print(f"[{self.algo_name}] Episode {len(self.episode_rewards)}, "
                  f"Timestep {self.num_timesteps}, "
                  f"Avg Reward (10 ep): {avg_reward:.2f}, "
                  f"Avg Score (10 ep): {avg_score:.0f}")

    def _on_training_end(self) -> None:
        if self.csv_file:
            self.csv_file.close()
            if self.verbose > 0:
                print(f"[MetricsCallback] Saved {len(self.episode_rewards)} episodes to {self.csv_path}")

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        if not self.episode_rewards:
            return {}

        return {
            "mean_reward": np.mean(self.episode_rewards),
            "std_reward": np.std(self.episode_rewards),
            "mean_length": np.mean(self.episode_lengths),
            "total_episodes": len(self.episode_rewards),
            "mean_score": np.mean(self.episode_scores),
            "max_level": int(np.max(self.episode_levels)),
            "mean_kills": np.mean(self.episode_kills),
        }


class TensorboardMetricsCallback(BaseCallback):
    """
    Logs game metrics to TensorBoard at the end of every episode.
    """

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            if done and "episode" in info:
                ep = info["episode"]
                self.logger.record("custom/episode_reward", ep["r"])
                self.logger.record("custom/episode_length", ep["l"])
                self.logger.record("custom/score", info.get("score", 0))
                self.logger.record("custom/level", info.get("level", 1))
                self.logger.record("custom/levels_cleared", info.get("levels_cleared", 0))

        return True
