from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..constants import BARREL_PIVOT_OFFSET_Y

if TYPE_CHECKING:
    from ..config import AimConfig, ViewportConfig


@dataclass
class AimVector:
    angle_deg: float  # Screen coordinates: negative is upward
    power: float  # Initial speed, units per tick

    def velocity(self) -> tuple[float, float]:
        a = math.radians(self.angle_deg)
        return math.cos(a) * self.power, math.sin(a) * self.power

    def to_dict(self) -> dict[str, float]:
        return {"angle_deg": float(self.angle_deg), "power": float(self.power)}


def initial_aim(aim: AimConfig) -> AimVector:
    return AimVector(angle_deg=aim.initial_angle_deg, power=aim.min_power)


def aim_angle(px: float, py: float, viewport: ViewportConfig, aim: AimConfig) -> float:
    """Angle from the barrel pivot towards the pointer, clamped to the launch range."""
    dx = px - viewport.launcher_x
    dy = py - (viewport.launcher_y - BARREL_PIVOT_OFFSET_Y)
    raw = math.degrees(math.atan2(dy, dx))
    return float(np.clip(raw, aim.min_angle_deg, aim.max_angle_deg))


def aim_power(
    px: float, py: float, start_x: float, start_y: float, viewport: ViewportConfig, aim: AimConfig
) -> float:
    """Drag distance from the gesture start, mapped linearly onto [min_power, max_power]."""
    dist = math.hypot(px - start_x, py - start_y)
    full_drag = viewport.width * aim.power_drag_frac
    t = float(np.clip(dist / full_drag, 0.0, 1.0))
    power = aim.min_power + t * (aim.max_power - aim.min_power)
    return float(np.clip(power, aim.min_power, aim.max_power))


def compute_aim(
    px: float, py: float, start_x: float, start_y: float, viewport: ViewportConfig, aim: AimConfig
) -> AimVector:
    return AimVector(
        angle_deg=aim_angle(px, py, viewport, aim),
        power=aim_power(px, py, start_x, start_y, viewport, aim),
    )
