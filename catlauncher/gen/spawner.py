from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from ..constants import (
    EVICT_BEHIND_FRAC,
    FIRST_OBSTACLE_X_FRAC,
    LAUNCH_GUARD_DX,
    LAUNCH_GUARD_DY,
    OBSTACLE_MAX_LIFT_FRAC,
    OBSTACLE_SPREAD_MULT,
)
from ..sim.obstacle import Obstacle, ObstacleType

if TYPE_CHECKING:
    from ..config import ObstacleConfig, ViewportConfig

logger = logging.getLogger("catlauncher.spawner")


class ObstacleSpawner:
    """
    Distance-gated obstacle generation ahead of the camera.

    The spawner walks a cursor (`last_obstacle_x`) to the right until it is
    past the right edge of the viewport plus `min_dist`. At each step a
    uniform draw decides whether to place an obstacle within
    [cursor + min_dist, cursor + 2.5 * min_dist]; the cursor then jumps to the
    new obstacle. Steps that do not place an obstacle (failed draw, or a
    candidate rejected by the launch guard) advance the cursor by `min_dist`,
    so a pass always terminates. A step that cannot move the cursor (coordinates
    past float precision) raises RuntimeError instead of looping.

    The live list stays ordered by x and only grows at the tail; eviction
    removes from the head side.
    """

    def __init__(self, config: ObstacleConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng
        self.obstacles: list[Obstacle] = []
        self.last_obstacle_x = 0.0
        self.rejected = 0

    def reset(self, viewport: ViewportConfig) -> None:
        self.obstacles = []
        self.last_obstacle_x = viewport.width * FIRST_OBSTACLE_X_FRAC
        self.rejected = 0

    def _spawn_chance(self) -> float:
        return self.config.density * self.config.min_dist

    def _candidate(self, viewport: ViewportConfig) -> Obstacle:
        cfg = self.config
        x = self.last_obstacle_x + float(self.rng.uniform(cfg.min_dist, cfg.min_dist * OBSTACLE_SPREAD_MULT))
        h = float(self.rng.uniform(cfg.height_min, cfg.height_max))
        lift = float(self.rng.uniform(0.0, viewport.height * OBSTACLE_MAX_LIFT_FRAC))
        y = viewport.ground_level - h / 2.0 - lift
        kind = ObstacleType.BOOST if self.rng.random() < cfg.boost_probability else ObstacleType.STOP
        return Obstacle(x=x, y=y, w=cfg.width, h=h, kind=kind)

    @staticmethod
    def _in_launch_guard(obs: Obstacle, launcher_x: float, launcher_y: float) -> bool:
        # Too close to the start and high up: unfair first obstacle.
        return obs.x < launcher_x + LAUNCH_GUARD_DX and obs.y < launcher_y - LAUNCH_GUARD_DY

    def _advance(self, prev_x: float, new_x: float) -> None:
        # The cursor must move forward or extend() never reaches the horizon.
        if not new_x > prev_x:
            raise RuntimeError(
                f"Spawn cursor stuck at x={prev_x!r} (next {new_x!r}); coordinates exceed float precision"
            )
        self.last_obstacle_x = new_x

    def extend(self, camera_x: float, viewport: ViewportConfig) -> list[Obstacle]:
        """Generate obstacles up to just past the right edge of the view. Returns the new ones."""
        spawned: list[Obstacle] = []
        horizon = camera_x + viewport.width + self.config.min_dist
        while self.last_obstacle_x < horizon:
            prev_x = self.last_obstacle_x
            if self.rng.random() >= self._spawn_chance():
                self._advance(prev_x, prev_x + self.config.min_dist)
                continue

            obs = self._candidate(viewport)
            if self._in_launch_guard(obs, viewport.launcher_x, viewport.launcher_y):
                self.rejected += 1
                logger.debug(f"Rejected obstacle at x={obs.x:.1f} y={obs.y:.1f} (launch guard)")
                self._advance(prev_x, prev_x + self.config.min_dist)
                continue

            self._advance(prev_x, obs.x)
            self.obstacles.append(obs)
            spawned.append(obs)
        return spawned

    def evict(self, camera_x: float, viewport: ViewportConfig) -> int:
        """Drop obstacles more than half a viewport behind the camera. Returns how many."""
        cutoff = camera_x - viewport.width * EVICT_BEHIND_FRAC
        keep = [obs for obs in self.obstacles if obs.x >= cutoff]
        evicted = len(self.obstacles) - len(keep)
        if evicted:
            self.obstacles = keep
        return evicted
