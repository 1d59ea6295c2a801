from .actions import InputEvent, InputKind
from .config import AimConfig, GameConfig, ObstacleConfig, PhysicsConfig, ViewportConfig
from .env.session import GameSession, GameState

__all__ = [
    "AimConfig",
    "GameConfig",
    "GameSession",
    "GameState",
    "InputEvent",
    "InputKind",
    "ObstacleConfig",
    "PhysicsConfig",
    "ViewportConfig",
]
