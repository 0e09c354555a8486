"""Invaders - fixed-timestep arcade shooter simulation"""

from .game import InvadersGame
from .state import Command, GamePhase, Pattern, SimulationState, WorldSnapshot
from .invaders_env import InvadersEnv, run_random_episode

__all__ = [
    'InvadersGame',
    'Command',
    'GamePhase',
    'Pattern',
    'SimulationState',
    'WorldSnapshot',
    'InvadersEnv',
    'run_random_episode',
]
