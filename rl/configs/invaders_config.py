"""
Training configuration for the invaders environment
Reward shaping variants and algorithm hyperparameters
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "max_steps": 10_000,   # ~3 minutes at 60 FPS
    "k_enemies": 5,
    "m_bullets": 3,
    "auto_advance": True,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Reward Config 1: BASELINE (balanced)
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced reward shaping",
    "R_POINTS": 0.01,    # Per score point (scales with level and enemy row)
    "R_KILL": 0.5,       # Reward for destroying an enemy
    "R_CLEAR": 5.0,      # Reward for wiping out a formation
    "R_HIT": 2.0,        # Penalty for losing a life
    "R_SHOT": 0.01,      # Penalty per shot (encourage aiming)
    "R_TIME": 0.001,     # Small time penalty
    "R_DEATH": 5.0,      # Game over penalty
}

# Reward Config 2: SURVIVAL (dodge first)
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize survival - higher hit/death penalties",
    "R_POINTS": 0.005,
    "R_KILL": 0.25,
    "R_CLEAR": 5.0,
    "R_HIT": 5.0,        # MUCH higher hit penalty - encourages dodging
    "R_SHOT": 0.02,
    "R_TIME": 0.0,       # No time penalty (reward survival)
    "R_DEATH": 10.0,
}

# Reward Config 3: AGGRESSIVE (clear levels fast)
REWARD_CONFIG_AGGRESSIVE = {
    "name": "aggressive",
    "description": "Prioritize kills and level clears - lower penalties",
    "R_POINTS": 0.02,
    "R_KILL": 1.0,
    "R_CLEAR": 10.0,
    "R_HIT": 1.0,
    "R_SHOT": 0.0,       # Free shots
    "R_TIME": 0.002,     # Higher time penalty - encourage action
    "R_DEATH": 3.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "aggressive": REWARD_CONFIG_AGGRESSIVE,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 2048,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 1_000_000,
    "save_freq": 20_000,
    "eval_freq": 10_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}


def get_reward_config(name: str) -> dict:
    """Look up a reward shaping variant by name"""
    if name not in REWARD_CONFIGS:
        raise ValueError(f"Unknown reward config: {name} (choose from {sorted(REWARD_CONFIGS)})")
    return REWARD_CONFIGS[name]
