from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import BOUNCE_MIN_VY, REST_SPEED_THRESHOLD, ROTATION_SPEED_THRESHOLD, SLIDE_FRICTION_MULT

if TYPE_CHECKING:
    from ..config import PhysicsConfig
    from .projectile import Projectile


@dataclass(frozen=True)
class StepResult:
    touched_ground: bool = False
    bounced: bool = False  # Noticeable bounce (|vy| after bounce > 1)
    rested: bool = False  # Came to rest this tick; the flight is over


def integrate(projectile: Projectile, physics: PhysicsConfig, ground_level: float) -> StepResult:
    """
    Advance the projectile by one tick (in place).

    Drag is applied multiplicatively after gravity each tick, then the position
    is advanced by the new velocity. Ground contact clamps the projectile onto
    the ground line and either bounces it (vx loses `ground_friction`) or, if
    the bounce is too small to notice, lands it into a slide with extra
    friction. A slide that decays below the rest threshold zeroes the velocity
    and reports `rested`.
    """
    p = projectile

    # Resting on the ground is a fixed point.
    if p.is_at_rest() and p.bottom >= ground_level:
        return StepResult(touched_ground=True, rested=True)

    p.vy += physics.gravity
    p.vx *= physics.air_resistance
    p.vy *= physics.air_resistance

    p.x += p.vx
    p.y += p.vy

    if abs(p.vx) > ROTATION_SPEED_THRESHOLD or abs(p.vy) > ROTATION_SPEED_THRESHOLD:
        p.rotation = math.atan2(p.vy, p.vx)

    if p.bottom < ground_level:
        p.on_ground = False
        return StepResult()

    p.y = ground_level - p.half_size
    p.vy *= -physics.bounce_factor

    bounced = abs(p.vy) > BOUNCE_MIN_VY
    if bounced:
        p.vx *= physics.ground_friction
    else:
        p.vy = 0.0
        p.vx *= physics.ground_friction * SLIDE_FRICTION_MULT
        p.on_ground = True

    if abs(p.vx) < REST_SPEED_THRESHOLD and abs(p.vy) < REST_SPEED_THRESHOLD:
        p.vx = 0.0
        p.vy = 0.0
        p.on_ground = True
        return StepResult(touched_ground=True, bounced=bounced, rested=True)

    return StepResult(touched_ground=True, bounced=bounced)
