from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .obstacle import Obstacle, ObstacleType

if TYPE_CHECKING:
    from .projectile import Projectile


def overlaps(projectile: Projectile, obstacle: Obstacle) -> bool:
    """Strict AABB overlap (touching edges do not count)."""
    p_left, p_top, p_right, p_bottom = projectile.bounds()
    o_left, o_top, o_right, o_bottom = obstacle.bounds()
    return p_right > o_left and p_left < o_right and p_bottom > o_top and p_top < o_bottom


def apply_effect(projectile: Projectile, obstacle: Obstacle, *, boost_x: float, boost_y: float) -> bool:
    """Apply the obstacle's effect. Returns True when the run must end."""
    kind = obstacle.kind
    if kind is ObstacleType.BOOST:
        projectile.vy = -boost_y
        projectile.vx += boost_x
        return False
    if kind is ObstacleType.STOP:
        projectile.vx = 0.0
        projectile.vy = 0.0
        return True
    raise ValueError(f"Unknown obstacle type: {kind!r}")


def find_collision(projectile: Projectile, obstacles: Iterable[Obstacle]) -> Obstacle | None:
    for obs in obstacles:
        if overlaps(projectile, obs):
            return obs
    return None


def resolve_collision(
    projectile: Projectile,
    obstacles: Iterable[Obstacle],
    *,
    boost_x: float,
    boost_y: float,
) -> tuple[Obstacle | None, bool]:
    """
    Resolve at most one collision for this tick.

    Obstacles are scanned in spawn order; the first overlap wins and any later
    overlaps are ignored until the next tick. Returns `(hit, ended)` where
    `ended` is True when a STOP obstacle was hit.
    """
    hit = find_collision(projectile, obstacles)
    if hit is None:
        return None, False
    return hit, apply_effect(projectile, hit, boost_x=boost_x, boost_y=boost_y)
