import pytest

from invaders.game import InvadersGame
from invaders.state import GamePhase, SimulationState


@pytest.fixture
def game():
    """Seeded game already past the level-1 intro"""
    g = InvadersGame(seed=1234)
    g.state.phase = GamePhase.ACTIVE
    return g


@pytest.fixture
def state():
    """Bare active state with no enemies or bullets"""
    s = SimulationState()
    s.phase = GamePhase.ACTIVE
    s.enemy_speed = 0.65
    return s
