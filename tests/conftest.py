import pytest

from catlauncher import GameConfig, GameSession, GameState, InputEvent
from catlauncher.config import ObstacleConfig
from catlauncher.sim.projectile import Projectile


@pytest.fixture
def session():
    return GameSession(GameConfig(seed=0))


@pytest.fixture
def empty_session():
    """A session whose spawner never places obstacles."""
    return GameSession(GameConfig(obstacles=ObstacleConfig(density=0.0), seed=0))


@pytest.fixture
def make_projectile():
    def _make(x: float, y: float, vx: float = 0.0, vy: float = 0.0, on_ground: bool = False) -> Projectile:
        return Projectile(x=x, y=y, vx=vx, vy=vy, size=20.0, on_ground=on_ground)

    return _make


@pytest.fixture
def put_in_flight():
    """Force a session into FLYING with the projectile at a given state."""

    def _fly(session: GameSession, x: float, y: float, vx: float, vy: float) -> GameSession:
        if session.state is not GameState.AIMING:
            session.tick([InputEvent.primary()])
        session.state = GameState.FLYING
        p = session.projectile
        p.x, p.y, p.vx, p.vy = x, y, vx, vy
        p.on_ground = False
        return session

    return _fly
