from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ObstacleType(str, Enum):
    BOOST = "boost"  # Trampoline: kicks the projectile up and forward
    STOP = "stop"  # Wall: ends the run


@dataclass(frozen=True)
class Obstacle:
    x: float  # Centre, screen coordinates
    y: float
    w: float
    h: float
    kind: ObstacleType

    def bounds(self) -> tuple[float, float, float, float]:
        """(left, top, right, bottom) of the axis-aligned bounding box."""
        hw = self.w * 0.5
        hh = self.h * 0.5
        return self.x - hw, self.y - hh, self.x + hw, self.y + hh

    def to_dict(self) -> dict[str, float | str]:
        return {
            "x": float(self.x),
            "y": float(self.y),
            "w": float(self.w),
            "h": float(self.h),
            "type": self.kind.value,
        }
