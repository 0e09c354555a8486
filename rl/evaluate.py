"""
Evaluation script for trained RL agents
"""

import time
import argparse
from typing import Optional

import numpy as np

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from invaders import InvadersEnv
from rl.configs.invaders_config import ENV_CONFIG
from rl.train import MultiDiscreteToDiscreteWrapper

ALGORITHMS = {"ppo": PPO, "dqn": DQN}


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
    vec_normalize_path: Optional[str] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo' or 'dqn')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
        vec_normalize_path: Path to VecNormalize stats (for PPO)
    """
    if algo not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algo}")
    model = ALGORITHMS[algo].load(model_path)

    render_mode = "human" if render else None
    env = InvadersEnv(render_mode=render_mode, **ENV_CONFIG)
    if algo == "dqn":
        env = MultiDiscreteToDiscreteWrapper(env)

    venv = DummyVecEnv([lambda: env])
    if vec_normalize_path:
        venv = VecNormalize.load(vec_normalize_path, venv)
        venv.training = False
        venv.norm_reward = False

    episode_rewards = []
    episode_scores = []
    episode_levels = []

    for episode in range(n_episodes):
        if seed is not None:
            venv.seed(seed + episode)
        obs = venv.reset()

        total_reward = 0.0
        steps = 0
        while True:
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, done, info = venv.step(action)
            total_reward += reward[0]
            steps += 1
            if render:
                time.sleep(1 / 60)
            if done[0]:
                break

        final = info[0]
        episode_rewards.append(total_reward)
        episode_scores.append(final.get("score", 0))
        episode_levels.append(final.get("level", 1))

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {final.get('score', 0)}, "
              f"Level = {final.get('level', 1)}, Length = {steps}")

    venv.close()

    print("\n" + "="*50)
    print(f"Evaluation Results ({n_episodes} episodes):")
    print(f"Mean Reward: {np.mean(episode_rewards):.2f} ± {np.std(episode_rewards):.2f}")
    print(f"Mean Score: {np.mean(episode_scores):.0f}")
    print(f"Best Level: {np.max(episode_levels)}")
    print("="*50)

    return {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_score": float(np.mean(episode_scores)),
        "episode_rewards": episode_rewards,
        "episode_scores": episode_scores,
    }


def compare_with_random(n_episodes: int = 10, seed: Optional[int] = None):
    """
    Evaluate a random policy baseline
    """
    print("Evaluating random policy baseline...")

    env = InvadersEnv(render_mode=None, **ENV_CONFIG)

    episode_rewards = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)
        env.action_space.seed(seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward

        episode_rewards.append(total_reward)
        episode_scores.append(info["score"])

    env.close()

    print(f"\nRandom Policy Results ({n_episodes} episodes):")
    print(f"Mean Reward: {np.mean(episode_rewards):.2f} ± {np.std(episode_rewards):.2f}")
    print(f"Mean Score: {np.mean(episode_scores):.0f}")

    return {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_score": float(np.mean(episode_scores)),
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate trained RL agent")
    parser.add_argument("model_path", type=str, help="Path to the trained model")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=sorted(ALGORITHMS),
        help="Algorithm used to train the model (default: ppo)",
    )
    parser.add_argument("--n-episodes", type=int, default=10,
                        help="Number of evaluation episodes (default: 10)")
    parser.add_argument("--no-render", action="store_true", help="Disable rendering")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--vec-normalize", type=str, default=None,
                        help="Path to VecNormalize stats file (for PPO)")
    parser.add_argument("--compare-random", action="store_true",
                        help="Also evaluate random policy for comparison")

    args = parser.parse_args()

    results = evaluate_model(
        model_path=args.model_path,
        algo=args.algo,
        n_episodes=args.n_episodes,
        render=not args.no_render,
        seed=args.seed,
        vec_normalize_path=args.vec_normalize,
    )

    if args.compare_random:
        random_results = compare_with_random(n_episodes=args.n_episodes, seed=args.seed)
        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:+.2f}")


if __name__ == "__main__":
    main()
