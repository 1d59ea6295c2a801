from .spawner import ObstacleSpawner

__all__ = ["ObstacleSpawner"]
